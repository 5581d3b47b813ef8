"""CLI commands: generate, rules and classnames for a JSON style attribute file."""

from __future__ import annotations

import json
import sys
from typing import IO, Any

import click

from style_engine.config import StyleEngineConfig
from style_engine.engine import StyleEngine


def _load_styles(source: IO[str]) -> Any:
    try:
        return json.load(source)
    except json.JSONDecodeError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)


def _parse_path(raw: str | None) -> tuple[str, ...] | None:
    if not raw:
        return None
    return tuple(part for part in raw.split(".") if part)


@click.command()
@click.argument("stylefile", type=click.File("r"))
@click.option("--inline/--no-inline", default=True, help="Render an inline style string")
@click.option("--path", "style_path", default=None, help="Only generate one style, e.g. spacing.padding")
@click.option("--render-zero", is_flag=True, help="Render 0 values instead of skipping them")
def generate(stylefile: IO[str], inline: bool, style_path: str | None, render_zero: bool) -> None:
    """Generate an inline style string from a JSON style attribute file.

    Use '-' to read the attributes from stdin.
    """
    block_styles = _load_styles(stylefile)
    engine = StyleEngine(config=StyleEngineConfig(render_zero=render_zero))
    click.echo(engine.generate(block_styles, inline=inline, path=_parse_path(style_path)))


@click.command()
@click.argument("stylefile", type=click.File("r"))
@click.option("--path", "style_path", default=None, help="Only resolve one style, e.g. spacing.padding")
@click.option("--render-zero", is_flag=True, help="Render 0 values instead of skipping them")
def rules(stylefile: IO[str], style_path: str | None, render_zero: bool) -> None:
    """Print the resolved CSS ruleset as JSON."""
    block_styles = _load_styles(stylefile)
    engine = StyleEngine(config=StyleEngineConfig(render_zero=render_zero))
    resolved = engine.get_rules(block_styles, path=_parse_path(style_path))
    click.echo(json.dumps(resolved, indent=2))


@click.command()
@click.argument("stylefile", type=click.File("r"))
@click.option("--render-zero", is_flag=True, help="Render 0 values instead of skipping them")
def classnames(stylefile: IO[str], render_zero: bool) -> None:
    """Print the utility classnames for a JSON style attribute file."""
    block_styles = _load_styles(stylefile)
    engine = StyleEngine(config=StyleEngineConfig(render_zero=render_zero))
    click.echo(engine.get_classnames(block_styles))
