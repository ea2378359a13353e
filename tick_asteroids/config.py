"""Game configuration and window bounds."""
from __future__ import annotations

from dataclasses import dataclass

from tick_asteroids.types import ConfigError, Size, Vec

IntRange = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Bounds:
    """Window extents, fixed for the whole session."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"Window bounds must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning knobs for one session.

    Inclusive ``(lo, hi)`` ranges are sampled with ``randint``; ``damage_range``
    is half-open and sampled with ``randrange``. Use ``dataclasses.replace``
    to derive a variant.

    Attributes:
        tick_interval_ms: Period of the tick driver.
        object_count: Number of stars, dots and asteroids spawned (each).
        row_spacing: Vertical gap between successive spawn rows.
        star_speed_range: Horizontal star speed, must be negative.
        dot_speed_range: Base horizontal dot speed, must be negative.
        dot_speed_factor: Multiplier applied to the base dot speed.
        asteroid_speed_range: Per-axis asteroid speed.
        asteroid_size_range: Asteroid half-diameter; the drawn size is doubled.
        asteroid_power_range: Hits-to-destroy, tracked only.
        star_size_range: Star edge length.
        dot_size: Dot extent.
        bullet_size: Bullet extent.
        bullet_speed: Bullet forward speed, faster than any ambient object.
        max_bullets: Cap on live bullets, ``None`` for no cap.
        ship_position: Initial top-left of the ship.
        ship_size: Ship extent.
        ship_step: Vertical distance moved per up/down intent.
        ship_energy: Initial ship energy (at most 100).
        damage_range: Energy lost per asteroid contact, half-open.
        asteroid_spawn_offset: Minimum gap between the ship and a new asteroid.
    """

    tick_interval_ms: int = 50
    object_count: int = 30
    row_spacing: int = 20
    star_speed_range: IntRange = (-5, -1)
    dot_speed_range: IntRange = (-5, -1)
    dot_speed_factor: int = 3
    asteroid_speed_range: IntRange = (-5, 4)
    asteroid_size_range: IntRange = (4, 7)
    asteroid_power_range: IntRange = (1, 3)
    star_size_range: IntRange = (4, 7)
    dot_size: Size = (2, 2)
    bullet_size: Size = (4, 1)
    bullet_speed: int = 25
    max_bullets: int | None = None
    ship_position: Vec = (10, 200)
    ship_size: Size = (50, 55)
    ship_step: int = 10
    ship_energy: int = 100
    damage_range: IntRange = (1, 10)
    asteroid_spawn_offset: int = 100

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ConfigError("tick_interval_ms must be positive")
        if self.object_count < 0:
            raise ConfigError("object_count must not be negative")
        if self.row_spacing < 0:
            raise ConfigError("row_spacing must not be negative")

        for name in (
            "star_speed_range",
            "dot_speed_range",
            "asteroid_speed_range",
            "asteroid_size_range",
            "asteroid_power_range",
            "star_size_range",
        ):
            _check_range(name, getattr(self, name))
        if self.star_speed_range[1] >= 0:
            raise ConfigError("star_speed_range must be strictly negative")
        if self.dot_speed_range[1] >= 0:
            raise ConfigError("dot_speed_range must be strictly negative")
        if self.dot_speed_factor < 1:
            raise ConfigError("dot_speed_factor must be at least 1")
        if self.asteroid_size_range[0] < 1 or self.star_size_range[0] < 1:
            raise ConfigError("size ranges must start at 1 or more")
        if not 1 <= self.asteroid_power_range[0] <= self.asteroid_power_range[1] <= 3:
            raise ConfigError("asteroid_power_range must lie within 1..3")

        for name in ("dot_size", "bullet_size", "ship_size"):
            w, h = getattr(self, name)
            if w <= 0 or h <= 0:
                raise ConfigError(f"{name} must be positive, got {(w, h)}")

        if self.bullet_speed <= self.fastest_ambient_speed():
            raise ConfigError(
                f"bullet_speed {self.bullet_speed} must exceed the fastest "
                f"ambient speed {self.fastest_ambient_speed()}"
            )
        if self.max_bullets is not None and self.max_bullets < 1:
            raise ConfigError("max_bullets must be None or at least 1")
        if self.ship_step <= 0:
            raise ConfigError("ship_step must be positive")
        if not 0 < self.ship_energy <= 100:
            raise ConfigError("ship_energy must be in 1..100")

        lo, hi = self.damage_range
        if not 1 <= lo < hi:
            raise ConfigError(
                f"damage_range must be a non-empty half-open range starting at 1 "
                f"or more, got {self.damage_range}"
            )
        if self.asteroid_spawn_offset < 0:
            raise ConfigError("asteroid_spawn_offset must not be negative")

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_interval_ms / 1000.0

    def fastest_ambient_speed(self) -> int:
        return max(
            abs(self.star_speed_range[0]),
            abs(self.dot_speed_range[0]) * self.dot_speed_factor,
            abs(self.asteroid_speed_range[0]),
            abs(self.asteroid_speed_range[1]),
        )


def _check_range(name: str, value: IntRange) -> None:
    lo, hi = value
    if lo > hi:
        raise ConfigError(f"{name} is empty: {value}")
