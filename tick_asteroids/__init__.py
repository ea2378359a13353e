"""tick-asteroids - Fixed-interval simulation core for a single-screen asteroids game."""

from tick_asteroids.clock import Clock
from tick_asteroids.collision import Resolution, collides, resolve_collisions
from tick_asteroids.commands import Fire, Intent, IntentQueue, MoveDown, MoveUp
from tick_asteroids.config import Bounds, GameConfig
from tick_asteroids.engine import Game
from tick_asteroids.entities import Asteroid, Body, Bullet, Dot, Ship, Star
from tick_asteroids.geometry import Rect, intersects
from tick_asteroids.lifecycle import apply_damage, prune_bullets, spawn_bullet
from tick_asteroids.signals import DAMAGE, DEATH, HIT, SignalBus
from tick_asteroids.spawn import build_state
from tick_asteroids.state import EntityView, GameState, Snapshot
from tick_asteroids.types import (
    ConfigError,
    GameError,
    InvariantError,
    Kind,
    Phase,
    SessionFailedError,
)

__all__ = [
    "Game",
    "GameConfig",
    "GameState",
    "Snapshot",
    "EntityView",
    "Bounds",
    "Clock",
    "Body",
    "Star",
    "Dot",
    "Asteroid",
    "Bullet",
    "Ship",
    "Kind",
    "Phase",
    "Rect",
    "intersects",
    "collides",
    "resolve_collisions",
    "Resolution",
    "spawn_bullet",
    "prune_bullets",
    "apply_damage",
    "build_state",
    "Intent",
    "IntentQueue",
    "Fire",
    "MoveUp",
    "MoveDown",
    "SignalBus",
    "HIT",
    "DAMAGE",
    "DEATH",
    "GameError",
    "ConfigError",
    "InvariantError",
    "SessionFailedError",
]
