"""Collision detection and resolution between bullets, asteroids and the ship."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from tick_asteroids.config import IntRange
from tick_asteroids.entities import Asteroid, Body, Bullet
from tick_asteroids.lifecycle import apply_damage
from tick_asteroids.signals import HIT, SignalBus
from tick_asteroids.state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Summary of one tick's collision pass."""

    bullet_hits: int = 0
    ship_hits: int = 0
    damage: int = 0
    died: bool = False


def collides(a: Body, b: Body) -> bool:
    """Strict overlap of the two collision rectangles. Symmetric."""
    return a.collision_rect().intersects(b.collision_rect())


def find_bullet_hits(state: GameState) -> list[tuple[Asteroid, Bullet]]:
    """Pair each active bullet with the first active asteroid it overlaps.

    Asteroids are scanned in background order; a bullet is spent on its first
    hit and cannot hit a second asteroid in the same tick.
    """
    pairs: list[tuple[Asteroid, Bullet]] = []
    spent: set[int] = set()
    for asteroid in state.asteroids():
        if not asteroid.active:
            continue
        rect = asteroid.collision_rect()
        for index, bullet in enumerate(state.bullets):
            if index in spent or not bullet.active:
                continue
            if rect.intersects(bullet.collision_rect()):
                pairs.append((asteroid, bullet))
                spent.add(index)
    return pairs


def find_ship_hits(state: GameState) -> list[Asteroid]:
    ship_rect = state.ship.collision_rect()
    return [
        asteroid
        for asteroid in state.asteroids()
        if asteroid.active and ship_rect.intersects(asteroid.collision_rect())
    ]


def resolve_collisions(
    state: GameState,
    bus: SignalBus,
    rng: random.Random,
    damage_range: IntRange,
    tick_number: int = 0,
) -> Resolution:
    """Detect every collision against this tick's positions, then apply them.

    Bullet hits are applied first: the bullet is deactivated and the asteroid
    is pushed flush against the right edge (``power`` is left untouched and
    asteroids are never destroyed). Ship hits were detected before any
    asteroid moved, so an asteroid struck by a bullet can still damage the
    ship in the same tick. Ship hits stop applying once the ship dies.
    """
    bullet_hits = find_bullet_hits(state)
    ship_hits = find_ship_hits(state) if state.running else []

    for asteroid, bullet in bullet_hits:
        bus.publish(HIT, asteroid=asteroid.position, bullet=bullet.position)
        bullet.active = False
        asteroid.push_to_right_edge(state.bounds)
        logger.debug("bullet hit asteroid, asteroid moved to %s", asteroid.position)

    total = 0
    applied = 0
    died = False
    for _asteroid in ship_hits:
        if not state.running:
            break
        amount = rng.randrange(*damage_range)
        total += amount
        applied += 1
        died = apply_damage(state, amount, bus, tick_number)

    return Resolution(
        bullet_hits=len(bullet_hits),
        ship_hits=applied,
        damage=total,
        died=died,
    )
