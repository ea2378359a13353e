"""Shared type aliases, enums and errors for tick-asteroids."""

from __future__ import annotations

import enum

Vec = tuple[int, int]
Size = tuple[int, int]


class Kind(enum.Enum):
    STAR = "star"
    DOT = "dot"
    ASTEROID = "asteroid"
    BULLET = "bullet"
    SHIP = "ship"


class Phase(enum.Enum):
    """Session state. RUNNING moves to TERMINAL or FAILED, never back."""

    RUNNING = "running"
    TERMINAL = "terminal"
    FAILED = "failed"


class GameError(Exception):
    """Base class for all tick-asteroids errors."""


class ConfigError(GameError, ValueError):
    """Raised on invalid configuration or window bounds."""


class InvariantError(GameError, ValueError):
    """Raised when an entity is built with invalid geometry."""


class SessionFailedError(GameError):
    """Raised by Game.step() once a tick has failed and the session is unusable."""
