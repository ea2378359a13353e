"""Tests for the initial world load."""
from __future__ import annotations

import random

import pytest

from tick_asteroids.config import Bounds, GameConfig
from tick_asteroids.entities import Asteroid, Dot, Star
from tick_asteroids.spawn import build_state, load_background, make_ship
from tick_asteroids.types import ConfigError, Phase


class TestMakeShip:
    def test_from_config(self) -> None:
        ship = make_ship(GameConfig(), Bounds(800, 600))
        assert ship.position == (10, 200)
        assert ship.size == (50, 55)
        assert ship.direction == (0, 10)
        assert ship.energy == 100

    def test_too_small_window(self) -> None:
        with pytest.raises(ConfigError):
            make_ship(GameConfig(), Bounds(40, 600))
        with pytest.raises(ConfigError):
            make_ship(GameConfig(), Bounds(800, 100))


class TestLoadBackground:
    def test_counts_and_order(self) -> None:
        config = GameConfig(object_count=5)
        bounds = Bounds(800, 600)
        ship = make_ship(config, bounds)
        entities = load_background(config, bounds, ship, random.Random(0))
        assert len(entities) == 15
        kinds = [type(e) for e in entities]
        assert kinds == [Asteroid, Star, Dot] * 5

    def test_everything_inside_window(self) -> None:
        config = GameConfig(object_count=60)
        bounds = Bounds(800, 600)
        ship = make_ship(config, bounds)
        for entity in load_background(config, bounds, ship, random.Random(9)):
            assert 0 <= entity.x <= bounds.width - entity.width
            assert 0 <= entity.y <= bounds.height - entity.height

    def test_ranges_respected(self) -> None:
        config = GameConfig()
        bounds = Bounds(800, 600)
        ship = make_ship(config, bounds)
        entities = load_background(config, bounds, ship, random.Random(3))
        for entity in entities:
            if isinstance(entity, Asteroid):
                assert entity.width == entity.height
                assert 8 <= entity.width <= 14 and entity.width % 2 == 0
                assert 1 <= entity.power <= 3
                assert all(-5 <= v <= 4 for v in entity.direction)
                assert entity.x >= ship.x + ship.width + config.asteroid_spawn_offset
            elif isinstance(entity, Star):
                assert -5 <= entity.direction[0] <= -1
                assert entity.direction[1] == 0
            else:
                assert entity.direction[0] in {-15, -12, -9, -6, -3}
                assert entity.size == (2, 2)

    def test_no_asteroid_starts_on_ship(self) -> None:
        config = GameConfig()
        bounds = Bounds(800, 600)
        ship = make_ship(config, bounds)
        for entity in load_background(config, bounds, ship, random.Random(11)):
            if isinstance(entity, Asteroid):
                assert not entity.collides_with(ship)

    def test_seed_reproducible(self) -> None:
        config = GameConfig(object_count=10)
        bounds = Bounds(800, 600)
        ship = make_ship(config, bounds)
        a = load_background(config, bounds, ship, random.Random(99))
        b = load_background(config, bounds, ship, random.Random(99))
        assert a == b


class TestBuildState:
    def test_fresh_state(self) -> None:
        state = build_state(GameConfig(object_count=4), 800, 600, random.Random(0))
        assert (state.bounds.width, state.bounds.height) == (800, 600)
        assert len(state.background) == 12
        assert state.bullets == []
        assert state.phase is Phase.RUNNING

    def test_invalid_bounds_refused(self) -> None:
        with pytest.raises(ConfigError):
            build_state(GameConfig(), 0, 600, random.Random(0))
