"""cssatom CLI entry point: Click group with subcommands."""

import click

from cssatom import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssatom")
def cli() -> None:
    """cssatom - split stylesheets into shared atomic class rules."""


# Import and register subcommands
from cssatom.cli.atomize import atomize  # noqa: E402
from cssatom.cli.inspect import inspect  # noqa: E402

cli.add_command(atomize)
cli.add_command(inspect)
