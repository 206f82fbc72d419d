"""CLI command: cssxpath detect -- guess the type of a selector."""

from __future__ import annotations

import click

from cssxpath.dispatcher import detect_selector_type


@click.command()
@click.argument("selector")
def detect(selector: str) -> None:
    """Print css, xpath or regex for SELECTOR."""
    click.echo(detect_selector_type(selector).value)
