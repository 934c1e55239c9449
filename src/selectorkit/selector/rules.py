"""Append rules for compound selectors.

Each rule is a pure function over a presence record (one flag per
:class:`Category`, in rank order) and the category about to be added. A rule
returns ``None`` when the append is allowed and raises otherwise.
"""

from __future__ import annotations

from selectorkit.errors import DuplicatePartError, OrderingError
from selectorkit.selector.category import Category


def check_single_occurrence(presence: tuple[bool, ...], category: Category) -> None:
    """Element, id and pseudo-element may occur only once."""
    if category.single_use and presence[category.rank]:
        raise DuplicatePartError(category)


def check_order(presence: tuple[bool, ...], category: Category) -> None:
    """No part may follow a part of a strictly higher rank."""
    for later in Category:
        if later.rank > category.rank and presence[later.rank]:
            raise OrderingError(category, after=later)


def highest_rank(presence: tuple[bool, ...]) -> int | None:
    """Rank of the latest category present, or ``None`` if none is."""
    for rank in range(len(presence) - 1, -1, -1):
        if presence[rank]:
            return rank
    return None


ALL_RULES = [
    check_single_occurrence,
    check_order,
]


def check_append(presence: tuple[bool, ...], category: Category) -> None:
    """Run every append rule; the first violation is raised."""
    for rule in ALL_RULES:
        rule(presence, category)
