"""CLI command: cssxpath inspect -- show how a selector is parsed."""

from __future__ import annotations

import sys

import click

from cssxpath.errors import SelectorError
from cssxpath.parser import parse_selector, split_selector_list


@click.command()
@click.argument("selector")
def inspect(selector: str) -> None:
    """Parse SELECTOR and display its segments.

    Shows, for each selector in a list, every step with its combinator,
    tag, id, classes, attributes and pseudo-classes.
    """
    try:
        branches = [parse_selector(branch) for branch in split_selector_list(selector)]
    except SelectorError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    for index, segments in enumerate(branches, start=1):
        click.echo(f"Selector {index}: {len(segments)} segment(s)")
        for segment in segments:
            if segment.is_xpath_passthrough:
                click.echo(f"  xpath={segment.xpath}")
                continue
            parts = [f"  {segment.combinator.name.lower()}", f"tag={segment.tag}"]
            if segment.id:
                parts.append(f"id={segment.id}")
            if segment.classes:
                parts.append("classes=" + ",".join(segment.classes))
            for attr in segment.attributes:
                if attr.operator:
                    parts.append(f'attr={attr.name}{attr.operator}"{attr.value}"')
                else:
                    parts.append(f"attr={attr.name}")
            if segment.pseudo is not None:
                parts.append(f"pseudo={segment.pseudo}")
            for extra in segment.extra_pseudos:
                parts.append(f"pseudo={extra}")
            click.echo("  ".join(parts))
