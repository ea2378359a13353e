"""Tick counter for the fixed-interval game loop."""
from __future__ import annotations

from tick_asteroids.types import ConfigError


class Clock:
    """Logical tick counter.

    Ticks are a sequence, not a wall-clock guarantee. ``interval`` is only
    what the drivers pace against.
    """

    def __init__(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ConfigError("tick interval must be positive")
        self._interval_ms = interval_ms
        self._tick_number = 0

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return self._interval_ms / 1000.0

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number
