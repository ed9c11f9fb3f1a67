"""Pixel geometry components.

Immutable integer canvas coordinates and axis-aligned rectangles. Rectangles
are half-open: ``top_left`` is inside, ``bottom_right`` is the first pixel
past the rectangle on both axes.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Canvas coordinate.

    Attributes:
        x: Pixel column (0 at left).
        y: Pixel row (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def as_tuple(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Return ``((x0, y0), (x1, y1))``."""
        return (
            (self.top_left.x, self.top_left.y),
            (self.bottom_right.x, self.bottom_right.y),
        )
