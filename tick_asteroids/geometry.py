"""Integer 2D vector helpers and axis-aligned rectangles."""
from __future__ import annotations

from dataclasses import dataclass

from tick_asteroids.types import Size, Vec


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def clamp(value: int, lo: int, hi: int) -> int:
    """Clamp *value* into ``[lo, hi]``. *lo* wins if the range is empty."""
    return lo if value < lo else hi if value > hi else value


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_corner(cls, position: Vec, size: Size) -> Rect:
        return cls(position[0], position[1], size[0], size[1])

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        return intersects(self, other)


def intersects(a: Rect, b: Rect) -> bool:
    """True when *a* and *b* share a region of non-zero area.

    Rectangles that only touch along an edge or a corner do not intersect.
    Empty rectangles never intersect anything.
    """
    if a.width <= 0 or a.height <= 0 or b.width <= 0 or b.height <= 0:
        return False
    return (
        a.x < b.right
        and b.x < a.right
        and a.y < b.bottom
        and b.y < a.bottom
    )
