"""Bullet spawning and pruning, ship energy and the one-shot death transition."""
from __future__ import annotations

import logging

from tick_asteroids.config import GameConfig
from tick_asteroids.entities import Bullet
from tick_asteroids.signals import DAMAGE, DEATH, SignalBus
from tick_asteroids.state import GameState
from tick_asteroids.types import Phase

logger = logging.getLogger(__name__)


def spawn_bullet(state: GameState, config: GameConfig) -> Bullet | None:
    """Append a bullet at the ship's leading edge, vertically centred.

    Returns ``None`` when ``config.max_bullets`` live bullets already exist.
    """
    if config.max_bullets is not None and len(state.bullets) >= config.max_bullets:
        logger.debug("fire rejected: %d bullets in flight", len(state.bullets))
        return None
    ship = state.ship
    width, height = config.bullet_size
    bullet = Bullet(
        position=(ship.x + ship.width, ship.y + ship.height // 2 - height // 2),
        direction=(config.bullet_speed, 0),
        size=(width, height),
    )
    state.bullets.append(bullet)
    logger.debug("bullet spawned at %s", bullet.position)
    return bullet


def prune_bullets(bullets: list[Bullet]) -> int:
    """Remove every inactive bullet in place. Returns how many were removed."""
    removed = 0
    for i in range(len(bullets) - 1, -1, -1):
        if not bullets[i].active:
            del bullets[i]
            removed += 1
    if removed:
        logger.debug("pruned %d bullets, %d left", removed, len(bullets))
    return removed


def apply_damage(
    state: GameState,
    amount: int,
    bus: SignalBus,
    tick_number: int = 0,
) -> bool:
    """Drain ship energy by *amount*.

    Publishes ``damage`` and, the first time energy reaches zero or below,
    moves the state to TERMINAL and publishes ``death``. Returns True only for
    the call that caused the death. Once the session has left RUNNING this is
    a no-op.
    """
    if not state.running:
        return False
    if amount < 0:
        raise ValueError(f"damage must not be negative, got {amount}")

    ship = state.ship
    ship.energy -= amount
    bus.publish(DAMAGE, amount=amount, energy=ship.energy)
    logger.debug("ship took %d damage, energy %d", amount, ship.energy)

    if ship.energy > 0:
        return False
    state.phase = Phase.TERMINAL
    bus.publish(DEATH, tick=tick_number)
    logger.info("ship destroyed on tick %d", tick_number)
    return True
