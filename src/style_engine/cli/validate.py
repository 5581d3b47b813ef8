"""CLI command: style-engine validate -- check the style definitions table."""

from __future__ import annotations

import sys

import click

from style_engine.schema import BLOCK_STYLE_DEFINITIONS
from style_engine.validation import validate_schema


@click.command()
def validate() -> None:
    """Validate the built-in style definitions.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors.
    """
    diagnostics = validate_schema(BLOCK_STYLE_DEFINITIONS)

    if not diagnostics:
        click.echo("OK: style definitions are valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if d.is_warning]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
