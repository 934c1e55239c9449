"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.category import Category


class SelectorError(Exception):
    """Base error for misuse of the selector builder."""

    def __init__(self, message: str, *, category: Category) -> None:
        super().__init__(message)
        self.category = category


class DuplicatePartError(SelectorError):
    """A single-use part (element, id, pseudo-element) was added twice."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector",
            category=category,
        )


class OrderingError(SelectorError):
    """A part was added after a part that must come later in the selector."""

    def __init__(self, category: Category, after: Category) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            category=category,
        )
        self.after = after


class SerializationError(Exception):
    """Raised when an object cannot be converted to or from JSON text."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
