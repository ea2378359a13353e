"""Session state and the read-only snapshot handed to renderers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from tick_asteroids.config import Bounds
from tick_asteroids.entities import Asteroid, Bullet, Dot, Ship, Star
from tick_asteroids.types import Kind, Phase, Size, Vec

BackgroundEntity = Union[Star, Dot, Asteroid]


@dataclass(frozen=True, slots=True)
class EntityView:
    kind: Kind
    position: Vec
    size: Size


@dataclass(frozen=True, slots=True)
class Snapshot:
    """What a renderer needs for one frame. Energy is reported clamped at 0."""

    width: int
    height: int
    tick_number: int
    entities: tuple[EntityView, ...]
    energy: int
    terminal: bool

    def of_kind(self, kind: Kind) -> tuple[EntityView, ...]:
        return tuple(e for e in self.entities if e.kind is kind)


@dataclass
class GameState:
    """Everything one session simulates. Owned by the game loop."""

    bounds: Bounds
    background: list[BackgroundEntity]
    ship: Ship
    bullets: list[Bullet] = field(default_factory=list)
    phase: Phase = Phase.RUNNING

    @property
    def terminal(self) -> bool:
        return self.phase is Phase.TERMINAL

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    def asteroids(self) -> Iterator[Asteroid]:
        for entity in self.background:
            if isinstance(entity, Asteroid):
                yield entity

    def active_bullets(self) -> Iterator[Bullet]:
        for bullet in self.bullets:
            if bullet.active:
                yield bullet

    def snapshot(self, tick_number: int) -> Snapshot:
        views: list[EntityView] = []
        for entity in self.background:
            if isinstance(entity, Asteroid) and not entity.active:
                continue
            views.append(EntityView(entity.kind, entity.position, entity.size))
        for bullet in self.active_bullets():
            views.append(EntityView(bullet.kind, bullet.position, bullet.size))
        views.append(EntityView(self.ship.kind, self.ship.position, self.ship.size))
        return Snapshot(
            width=self.bounds.width,
            height=self.bounds.height,
            tick_number=tick_number,
            entities=tuple(views),
            energy=max(self.ship.energy, 0),
            terminal=self.terminal,
        )
