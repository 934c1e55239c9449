"""Selector part categories and their fixed ordering."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Kind of a compound selector part, valued by its rank.

    Parts must appear in rank order inside a single compound selector:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        return self.value

    @property
    def single_use(self) -> bool:
        """True for parts that may occur at most once per selector."""
        return self in _SINGLE_USE

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def format(self, value: str) -> str:
        """Return the textual fragment for *value* in this category."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLE_USE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}

# Presence record with no category set.
EMPTY_PRESENCE: tuple[bool, ...] = (False,) * len(Category)
