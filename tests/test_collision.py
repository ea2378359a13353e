"""Tests for collision detection and resolution."""
from __future__ import annotations

import random

import pytest

from tick_asteroids.collision import (
    collides,
    find_bullet_hits,
    find_ship_hits,
    resolve_collisions,
)
from tick_asteroids.config import Bounds
from tick_asteroids.entities import Asteroid, Bullet, Ship, Star
from tick_asteroids.signals import DAMAGE, DEATH, HIT, SignalBus
from tick_asteroids.state import GameState
from tick_asteroids.types import Phase

DAMAGE_RANGE = (1, 10)


def _state(
    background: list | None = None,
    bullets: list[Bullet] | None = None,
    energy: int = 100,
) -> GameState:
    return GameState(
        bounds=Bounds(800, 600),
        background=background or [],
        ship=Ship((10, 200), (0, 10), (50, 55), energy=energy),
        bullets=bullets or [],
    )


def _names(bus: SignalBus) -> list[str]:
    return [name for name, _ in bus.flush()]


@pytest.fixture
def bus() -> SignalBus:
    return SignalBus()


# ── Detection ─────────────────────────────────────────────────────


class TestCollides:
    def test_commutative(self) -> None:
        a = Asteroid((100, 100), (0, 0), (20, 20))
        entities = [
            Bullet((110, 110), (25, 0), (4, 1)),
            Bullet((120, 110), (25, 0), (4, 1)),
            Star((99, 99), (-1, 0), (2, 2)),
            Ship((10, 200), (0, 10), (50, 55)),
        ]
        for other in entities:
            assert collides(a, other) == collides(other, a)

    def test_touching_is_not_a_collision(self) -> None:
        a = Asteroid((100, 100), (0, 0), (20, 20))
        b = Bullet((120, 105), (25, 0), (4, 1))
        assert not collides(a, b)
        b.position = (119, 105)
        assert collides(a, b)


class TestFindBulletHits:
    def test_pairs_active_only(self) -> None:
        asteroid = Asteroid((100, 100), (0, 0), (20, 20))
        live = Bullet((105, 105), (25, 0), (4, 1))
        dead = Bullet((106, 106), (25, 0), (4, 1), active=False)
        state = _state([asteroid], [dead, live])
        pairs = find_bullet_hits(state)
        assert len(pairs) == 1
        assert pairs[0][0] is asteroid
        assert pairs[0][1] is live

    def test_inactive_asteroid_ignored(self) -> None:
        asteroid = Asteroid((100, 100), (0, 0), (20, 20), active=False)
        state = _state([asteroid], [Bullet((105, 105), (25, 0), (4, 1))])
        assert find_bullet_hits(state) == []

    def test_bullet_spent_on_first_asteroid(self) -> None:
        first = Asteroid((100, 100), (0, 0), (20, 20))
        second = Asteroid((102, 100), (0, 0), (20, 20))
        bullet = Bullet((110, 105), (25, 0), (4, 1))
        pairs = find_bullet_hits(_state([first, second], [bullet]))
        assert len(pairs) == 1
        assert pairs[0][0] is first

    def test_one_asteroid_many_bullets(self) -> None:
        asteroid = Asteroid((100, 100), (0, 0), (20, 20))
        bullets = [Bullet((100 + i, 105), (25, 0), (4, 1)) for i in range(3)]
        pairs = find_bullet_hits(_state([asteroid], bullets))
        assert [b for _, b in pairs] == bullets

    def test_stars_are_not_targets(self) -> None:
        star = Star((100, 100), (-1, 0), (20, 20))
        state = _state([star], [Bullet((105, 105), (25, 0), (4, 1))])
        assert find_bullet_hits(state) == []


class TestFindShipHits:
    def test_overlapping_asteroids(self) -> None:
        near = Asteroid((40, 220), (0, 0), (20, 20))
        far = Asteroid((400, 220), (0, 0), (20, 20))
        touching = Asteroid((60, 220), (0, 0), (20, 20))
        hits = find_ship_hits(_state([near, far, touching]))
        assert len(hits) == 1
        assert hits[0] is near


# ── Resolution ────────────────────────────────────────────────────


class TestBulletResolution:
    def test_bullet_deactivated_and_asteroid_pushed(self, bus: SignalBus) -> None:
        asteroid = Asteroid((300, 100), (3, 2), (14, 14), power=2)
        bullet = Bullet((305, 105), (25, 0), (4, 1))
        state = _state([asteroid], [bullet])

        result = resolve_collisions(state, bus, random.Random(0), DAMAGE_RANGE)

        assert result.bullet_hits == 1
        assert bullet.active is False
        assert asteroid.position == (786, 100)
        assert asteroid.direction == (3, 2)
        assert asteroid.power == 2
        assert asteroid.active is True
        assert _names(bus) == [HIT]

    def test_hit_payload(self, bus: SignalBus) -> None:
        asteroid = Asteroid((300, 100), (0, 0), (14, 14))
        bullet = Bullet((305, 105), (25, 0), (4, 1))
        resolve_collisions(_state([asteroid], [bullet]), bus, random.Random(0), DAMAGE_RANGE)
        (name, data), = bus.flush()
        assert name == HIT
        assert data == {"asteroid": (300, 100), "bullet": (305, 105)}

    def test_no_collision_no_signal(self, bus: SignalBus) -> None:
        state = _state([Asteroid((300, 100), (0, 0), (14, 14))], [Bullet((60, 227), (25, 0), (4, 1))])
        result = resolve_collisions(state, bus, random.Random(0), DAMAGE_RANGE)
        assert result.bullet_hits == 0
        assert bus.flush() == []


class TestShipResolution:
    def test_damage_within_range(self, bus: SignalBus) -> None:
        state = _state([Asteroid((40, 220), (0, 0), (20, 20))])
        result = resolve_collisions(state, bus, random.Random(5), DAMAGE_RANGE)
        expected = random.Random(5).randrange(1, 10)
        assert result.damage == expected
        assert state.ship.energy == 100 - expected
        (name, data), = bus.flush()
        assert name == DAMAGE
        assert data == {"amount": expected, "energy": 100 - expected}

    def test_damage_per_asteroid(self, bus: SignalBus) -> None:
        state = _state([
            Asteroid((40, 220), (0, 0), (20, 20)),
            Asteroid((30, 230), (0, 0), (20, 20)),
        ])
        result = resolve_collisions(state, bus, random.Random(1), DAMAGE_RANGE)
        assert result.ship_hits == 2
        assert state.ship.energy == 100 - result.damage
        assert _names(bus) == [DAMAGE, DAMAGE]

    def test_lethal_hit_stops_further_damage(self, bus: SignalBus) -> None:
        state = _state(
            [
                Asteroid((40, 220), (0, 0), (20, 20)),
                Asteroid((30, 230), (0, 0), (20, 20)),
            ],
            energy=1,
        )
        result = resolve_collisions(state, bus, random.Random(1), DAMAGE_RANGE)
        assert result.died is True
        assert result.ship_hits == 1
        assert state.phase is Phase.TERMINAL
        assert _names(bus) == [DAMAGE, DEATH]

    def test_terminal_state_takes_no_damage(self, bus: SignalBus) -> None:
        state = _state([Asteroid((40, 220), (0, 0), (20, 20))], energy=3)
        state.phase = Phase.TERMINAL
        result = resolve_collisions(state, bus, random.Random(1), DAMAGE_RANGE)
        assert result.ship_hits == 0
        assert state.ship.energy == 3
        assert bus.flush() == []


class TestCombined:
    def test_same_asteroid_hit_and_damaging(self, bus: SignalBus) -> None:
        # Overlaps both the ship and a fresh bullet on the ship's nose.
        asteroid = Asteroid((55, 220), (0, 0), (20, 20))
        bullet = Bullet((60, 227), (25, 0), (4, 1))
        state = _state([asteroid], [bullet])

        result = resolve_collisions(state, bus, random.Random(2), DAMAGE_RANGE)

        assert result.bullet_hits == 1
        assert result.ship_hits == 1
        assert bullet.active is False
        assert asteroid.position == (780, 220)
        assert state.ship.energy < 100
        assert _names(bus) == [HIT, DAMAGE]
