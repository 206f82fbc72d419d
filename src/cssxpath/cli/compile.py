"""CLI command: cssxpath compile -- translate selectors to XPath."""

from __future__ import annotations

import sys

import click

from cssxpath.config import CompilerConfig
from cssxpath.dispatcher import Compiler
from cssxpath.errors import SelectorError


@click.command("compile")
@click.argument("selectors", nargs=-1, required=True)
@click.option(
    "--type",
    "expression_type",
    type=click.Choice(["css", "xpath", "regex"], case_sensitive=False),
    default="css",
    show_default=True,
    help="How to interpret the selectors.",
)
@click.option(
    "--escape-literals/--raw-literals",
    default=False,
    help="Quote values so embedded quotes stay valid XPath.",
)
@click.option(
    "--exact-siblings/--first-sibling",
    default=False,
    help='Compile "~" as any following sibling instead of the first one.',
)
def compile_command(
    selectors: tuple[str, ...],
    expression_type: str,
    escape_literals: bool,
    exact_siblings: bool,
) -> None:
    """Compile one or more selectors and print one XPath per line.

    Exits with code 1 if any selector is invalid.
    """
    config = CompilerConfig(
        escape_literals=escape_literals,
        sibling_first_only=not exact_siblings,
    )
    compiler = Compiler(config)

    failed = False
    for selector in selectors:
        try:
            click.echo(compiler.compile(selector, expression_type))
        except SelectorError as exc:
            click.echo(f"Error: {exc}", err=True)
            failed = True

    if failed:
        sys.exit(1)
