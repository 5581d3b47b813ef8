"""CLI command: style-engine inspect -- display the style definitions table."""

from __future__ import annotations

import click

from style_engine.model.definition import Expansion
from style_engine.schema import BLOCK_STYLE_DEFINITIONS


@click.command()
def inspect() -> None:
    """Display the built-in style definitions.

    Shows each category with its attributes, CSS property, path and
    classname template.
    """
    for category, entries in BLOCK_STYLE_DEFINITIONS.items():
        click.echo(f"{category}:")
        for attribute, definition in entries.items():
            parts = [f"  {attribute}", f"property={definition.property_key}"]
            parts.append(f"path={'.'.join(definition.path)}")
            if definition.classname_template:
                parts.append(f'classname="{definition.classname_template}"')
            if definition.expansion is not Expansion.DEFAULT:
                parts.append(f"expansion={definition.expansion.value}")
            if definition.handler_id:
                parts.append(f"handler={definition.handler_id}")
            click.echo("  ".join(parts))
        click.echo()
