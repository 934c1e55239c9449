"""Selector model: immutable compound and combined selector states."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Union

from selectorkit.errors import SelectorError
from selectorkit.selector.category import EMPTY_PRESENCE, Category
from selectorkit.selector.rules import check_append, highest_rank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorState:
    """A compound selector under construction.

    Every part-appending method returns a new state; the receiver is never
    modified, so several chains may safely branch from a common ancestor.

    Attributes:
        text: The selector text accumulated so far.
        presence: One flag per :class:`Category`, in rank order.
    """

    text: str = ""
    presence: tuple[bool, ...] = field(default=EMPTY_PRESENCE)

    @property
    def stage(self) -> Category | None:
        """The latest category added to this selector, if any."""
        rank = highest_rank(self.presence)
        return None if rank is None else Category(rank)

    @property
    def is_empty(self) -> bool:
        return not any(self.presence)

    def has(self, category: Category) -> bool:
        return self.presence[category.rank]

    # --- parts ----------------------------------------------------------------

    def append(self, category: Category, value: str) -> SelectorState:
        """Return a copy with *value* added as a *category* part.

        Raises :class:`~selectorkit.errors.DuplicatePartError` or
        :class:`~selectorkit.errors.OrderingError` when the part is not
        allowed after the parts already present.
        """
        try:
            check_append(self.presence, category)
        except SelectorError as exc:
            logger.debug(
                "Rejected %s %r after %r: %s", category.label, value, self.text, exc
            )
            raise
        presence = list(self.presence)
        presence[category.rank] = True
        return replace(
            self, text=self.text + category.format(value), presence=tuple(presence)
        )

    def element(self, value: str) -> SelectorState:
        return self.append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorState:
        return self.append(Category.ID, value)

    def class_(self, value: str) -> SelectorState:
        return self.append(Category.CLASS, value)

    def attribute(self, value: str) -> SelectorState:
        return self.append(Category.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorState:
        return self.append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorState:
        return self.append(Category.PSEUDO_ELEMENT, value)

    # --- output ---------------------------------------------------------------

    def render(self) -> str:
        """Return the selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator; final, meant only for rendering."""

    text: str

    def render(self) -> str:
        """Return the selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text


Renderable = Union[SelectorState, CombinedSelector]


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join two selectors as ``"<left> <combinator> <right>"``.

    The combinator (``+``, ``~``, ``>`` or a space for descendants) is
    inserted verbatim.
    """
    return CombinedSelector(text=f"{left.render()} {combinator} {right.render()}")
