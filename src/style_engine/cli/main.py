"""Style engine CLI entry point: Click group with subcommands."""

import click

from style_engine import __version__


@click.group()
@click.version_option(version=__version__, prog_name="style-engine")
def cli() -> None:
    """Style engine - classnames and inline CSS from block style attributes."""


# Import and register subcommands
from style_engine.cli.generate import classnames, generate, rules  # noqa: E402
from style_engine.cli.inspect import inspect  # noqa: E402
from style_engine.cli.validate import validate  # noqa: E402

cli.add_command(generate)
cli.add_command(rules)
cli.add_command(classnames)
cli.add_command(inspect)
cli.add_command(validate)
