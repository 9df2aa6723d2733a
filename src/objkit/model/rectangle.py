"""Rectangle model: a two-field value object with a derived area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with *width* and *height*.

    Values are stored as given; no range checks are applied and the fields
    may be reassigned after construction.
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
