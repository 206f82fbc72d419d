"""cssxpath CLI entry point: Click group with subcommands."""

import logging

import click

from cssxpath import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssxpath")
@click.option("-v", "--verbose", is_flag=True, help="Log compilation details to stderr.")
def cli(verbose: bool) -> None:
    """cssxpath - compile CSS-like selectors into XPath 1.0 expressions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from cssxpath.cli.compile import compile_command  # noqa: E402
from cssxpath.cli.detect import detect  # noqa: E402
from cssxpath.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_command)
cli.add_command(detect)
cli.add_command(inspect)
