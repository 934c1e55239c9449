"""Plain geometric data objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with a computed area.

    >>> r = Rectangle(10, 20)
    >>> r.width, r.height, r.area
    (10, 20, 200)
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area
