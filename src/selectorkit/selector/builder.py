"""CSS selector builder facade.

Example::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("span"),
    ).render()
    # 'div#main + span'
"""

from __future__ import annotations

from selectorkit.selector.model import (
    CombinedSelector,
    Renderable,
    SelectorState,
    combine,
)

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Entry point that starts every selector chain from an empty state."""

    def __init__(self, start: SelectorState | None = None) -> None:
        self._start = start or SelectorState()

    @property
    def start(self) -> SelectorState:
        return self._start

    def element(self, value: str) -> SelectorState:
        return self._start.element(value)

    def id(self, value: str) -> SelectorState:
        return self._start.id(value)

    def class_(self, value: str) -> SelectorState:
        return self._start.class_(value)

    def attribute(self, value: str) -> SelectorState:
        return self._start.attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorState:
        return self._start.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorState:
        return self._start.pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        return combine(left, combinator, right)

    def render(self) -> str:
        """Render the starting state (empty unless one was supplied)."""
        return self._start.render()


css_selector_builder = SelectorBuilder()
