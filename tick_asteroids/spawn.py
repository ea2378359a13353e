"""Initial world load: background rows and the ship."""
from __future__ import annotations

import logging
import random

from tick_asteroids.config import Bounds, GameConfig
from tick_asteroids.entities import Asteroid, Dot, Ship, Star
from tick_asteroids.state import BackgroundEntity, GameState
from tick_asteroids.types import ConfigError

logger = logging.getLogger(__name__)


def make_ship(config: GameConfig, bounds: Bounds) -> Ship:
    x, y = config.ship_position
    w, h = config.ship_size
    if x < 0 or y < 0 or x + w > bounds.width or y + h > bounds.height:
        raise ConfigError(
            f"Ship at {config.ship_position} size {config.ship_size} does not "
            f"fit a {bounds.width}x{bounds.height} window"
        )
    return Ship(
        position=(x, y),
        direction=(0, config.ship_step),
        size=(w, h),
        energy=config.ship_energy,
    )


def _row(i: int, spacing: int, extent: int, bounds: Bounds, offset: int = 0) -> int:
    """Row i's y, folded back into the window when rows run past the bottom."""
    span = max(bounds.height - extent, 1)
    return (i * spacing + offset) % span


def _asteroid(
    i: int, config: GameConfig, bounds: Bounds, ship: Ship, rng: random.Random
) -> Asteroid:
    side = 2 * rng.randint(*config.asteroid_size_range)
    right_most = max(bounds.width - side, 0)
    left_most = min(ship.x + ship.width + config.asteroid_spawn_offset, right_most)
    return Asteroid(
        position=(
            rng.randint(left_most, right_most),
            _row(i, config.row_spacing, side, bounds),
        ),
        direction=(
            rng.randint(*config.asteroid_speed_range),
            rng.randint(*config.asteroid_speed_range),
        ),
        size=(side, side),
        power=rng.randint(*config.asteroid_power_range),
    )


def _star(i: int, config: GameConfig, bounds: Bounds, rng: random.Random) -> Star:
    side = rng.randint(*config.star_size_range)
    return Star(
        position=(
            rng.randint(0, max(bounds.width - side, 0)),
            _row(i, config.row_spacing, side, bounds),
        ),
        direction=(rng.randint(*config.star_speed_range), 0),
        size=(side, side),
    )


def _dot(i: int, config: GameConfig, bounds: Bounds, rng: random.Random) -> Dot:
    w, h = config.dot_size
    y = _row(i, config.row_spacing, h, bounds, offset=config.row_spacing // 2)
    return Dot(
        position=(rng.randint(0, max(bounds.width - w, 0)), y),
        direction=(config.dot_speed_factor * rng.randint(*config.dot_speed_range), 0),
        size=(w, h),
        speed_range=config.dot_speed_range,
        speed_factor=config.dot_speed_factor,
    )


def load_background(
    config: GameConfig, bounds: Bounds, ship: Ship, rng: random.Random
) -> list[BackgroundEntity]:
    """One asteroid, one star and one dot per row, in that order."""
    entities: list[BackgroundEntity] = []
    for i in range(config.object_count):
        entities.append(_asteroid(i, config, bounds, ship, rng))
        entities.append(_star(i, config, bounds, rng))
        entities.append(_dot(i, config, bounds, rng))
    return entities


def build_state(
    config: GameConfig, width: int, height: int, rng: random.Random
) -> GameState:
    """Create the session state. Raises ConfigError for unusable bounds."""
    bounds = Bounds(width, height)
    ship = make_ship(config, bounds)
    background = load_background(config, bounds, ship, rng)
    logger.debug("loaded %d background entities", len(background))
    return GameState(bounds=bounds, background=background, ship=ship)
