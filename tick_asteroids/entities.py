"""Entity variants and their per-tick motion rules.

Every variant shares the :class:`Body` geometry record (top-left position,
per-tick direction, size) and implements ``update(bounds, rng)`` and
``collision_rect()``. Lists of mixed kinds are iterated without caring which
variant is which.

Edge policy, all checked after the displacement is applied:

- Star, Dot: wrap to the right edge when ``x <= 0``.
- Asteroid: reflect off all four edges, inclusive, pointing the velocity back
  inside so a second out-of-bounds tick cannot flip it outward again.
- Bullet: deactivate when ``x > width``.
- Ship: never moves on its own; up/down are clamped before committing.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar

from tick_asteroids.config import Bounds, IntRange
from tick_asteroids.geometry import Rect, add, clamp
from tick_asteroids.types import InvariantError, Kind, Size, Vec


@dataclass
class Body:
    """Geometry shared by every entity."""

    position: Vec
    direction: Vec
    size: Size

    kind: ClassVar[Kind]

    def __post_init__(self) -> None:
        for name in ("position", "direction", "size"):
            value = getattr(self, name)
            if len(value) != 2 or not all(
                isinstance(v, int) and not isinstance(v, bool) for v in value
            ):
                raise InvariantError(
                    f"{type(self).__name__}.{name} must be two ints, got {value!r}"
                )
        if self.size[0] <= 0 or self.size[1] <= 0:
            raise InvariantError(
                f"{type(self).__name__} size must be positive, got {self.size}"
            )

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def collision_rect(self) -> Rect:
        return Rect.from_corner(self.position, self.size)

    def collides_with(self, other: Body) -> bool:
        return self.collision_rect().intersects(other.collision_rect())


@dataclass
class Star(Body):
    """Background star drifting left, wrapping to the right edge."""

    kind: ClassVar[Kind] = Kind.STAR

    def update(self, bounds: Bounds, rng: random.Random) -> None:
        x = self.x + self.direction[0]
        if x <= 0:
            x = bounds.width
        self.position = (x, self.y)


@dataclass
class Dot(Body):
    """Background dot; re-enters on the right with a freshly drawn speed."""

    speed_range: IntRange = (-5, -1)
    speed_factor: int = 3

    kind: ClassVar[Kind] = Kind.DOT

    def update(self, bounds: Bounds, rng: random.Random) -> None:
        x, y = add(self.position, self.direction)
        if x <= 0:
            x = bounds.width
            dx = self.speed_factor * rng.randint(*self.speed_range)
            self.direction = (dx, self.direction[1])
        self.position = (x, y)


@dataclass
class Asteroid(Body):
    power: int = 1
    active: bool = True

    kind: ClassVar[Kind] = Kind.ASTEROID

    def update(self, bounds: Bounds, rng: random.Random) -> None:
        if not self.active:
            return
        x, y = add(self.position, self.direction)
        dx, dy = self.direction

        if x <= 0:
            dx = abs(dx)
        elif x >= bounds.width - self.width:
            dx = -abs(dx)

        if y <= 0:
            dy = abs(dy)
        elif y >= bounds.height - self.height:
            dy = -abs(dy)

        self.position = (x, y)
        self.direction = (dx, dy)

    def push_to_right_edge(self, bounds: Bounds) -> None:
        """Move flush against the right window edge, keeping y."""
        self.position = (bounds.width - self.width, self.y)


@dataclass
class Bullet(Body):
    active: bool = True

    kind: ClassVar[Kind] = Kind.BULLET

    def update(self, bounds: Bounds, rng: random.Random) -> None:
        if not self.active:
            return
        x = self.x + self.direction[0]
        self.position = (x, self.y)
        if x > bounds.width:
            self.active = False


@dataclass
class Ship(Body):
    """Player ship. Stationary in x; owns its energy."""

    energy: int = 100

    kind: ClassVar[Kind] = Kind.SHIP

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 0 <= self.energy <= 100:
            raise InvariantError(f"Ship energy must be in 0..100, got {self.energy}")

    @property
    def step(self) -> int:
        return abs(self.direction[1])

    def update(self, bounds: Bounds, rng: random.Random) -> None:
        pass

    def up(self, bounds: Bounds) -> None:
        self._move_to(self.y - self.step, bounds)

    def down(self, bounds: Bounds) -> None:
        self._move_to(self.y + self.step, bounds)

    def _move_to(self, y: int, bounds: Bounds) -> None:
        self.position = (self.x, clamp(y, 0, bounds.height - self.height))
