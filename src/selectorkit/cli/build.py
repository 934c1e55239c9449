"""CLI commands: selectorkit build / combine -- render selectors."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorError
from selectorkit.selector import CombinedSelector, css_selector_builder


@click.command()
@click.option("-e", "--element", default=None, help="Element (type) selector")
@click.option("-i", "--id", "id_", default=None, help="Id selector")
@click.option(
    "-c", "--class", "classes", multiple=True, help="Class selector (repeatable)"
)
@click.option(
    "-a",
    "--attr",
    "attrs",
    multiple=True,
    help="Attribute selector body (repeatable)",
)
@click.option(
    "-p",
    "--pseudo-class",
    "pseudo_classes",
    multiple=True,
    help="Pseudo-class (repeatable)",
)
@click.option("-P", "--pseudo-element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector and print it.

    Parts are applied in selector order: element, id, classes, attributes,
    pseudo-classes, pseudo-element.
    """
    state = css_selector_builder.start
    try:
        if element is not None:
            state = state.element(element)
        if id_ is not None:
            state = state.id(id_)
        for value in classes:
            state = state.class_(value)
        for value in attrs:
            state = state.attribute(value)
        for value in pseudo_classes:
            state = state.pseudo_class(value)
        if pseudo_element is not None:
            state = state.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    if state.is_empty:
        click.echo("Selector error: no selector parts given", err=True)
        sys.exit(1)

    click.echo(state.render())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two rendered selectors with a combinator (+, ~, > or ' ')."""
    joined = css_selector_builder.combine(
        CombinedSelector(left), combinator, CombinedSelector(right)
    )
    click.echo(joined.render())
