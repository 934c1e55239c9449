"""CLI command: selectorkit rect -- describe a rectangle."""

from __future__ import annotations

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.serialization import to_json
from selectorkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rect(config: SelectorKitConfig, width: float, height: float) -> None:
    """Print a rectangle as JSON followed by its area."""
    rectangle = Rectangle(width, height)
    click.echo(to_json(rectangle, indent=config.json_indent))
    click.echo(f"Area: {rectangle.area:g}")
