"""Entity drawing: one shape per kind, read straight from the snapshot."""
from __future__ import annotations

import pygame

from tick_asteroids import EntityView, Kind, Snapshot

STAR_COLOR = (255, 255, 255)
DOT_COLOR = (255, 255, 255)
ASTEROID_COLOR = (220, 220, 220)
BULLET_COLOR = (255, 69, 0)
SHIP_COLOR = (0, 200, 255)


def _draw_star(surface: pygame.Surface, view: EntityView) -> None:
    x, y = view.position
    w, h = view.size
    pygame.draw.line(surface, STAR_COLOR, (x, y), (x + w, y + h))
    pygame.draw.line(surface, STAR_COLOR, (x, y + h), (x + w, y))


def _draw_dot(surface: pygame.Surface, view: EntityView) -> None:
    pygame.draw.rect(surface, DOT_COLOR, pygame.Rect(view.position, view.size))


def _draw_asteroid(surface: pygame.Surface, view: EntityView) -> None:
    pygame.draw.ellipse(surface, ASTEROID_COLOR, pygame.Rect(view.position, view.size))


def _draw_bullet(surface: pygame.Surface, view: EntityView) -> None:
    pygame.draw.rect(surface, BULLET_COLOR, pygame.Rect(view.position, view.size), 1)


def _draw_ship(surface: pygame.Surface, view: EntityView) -> None:
    x, y = view.position
    w, h = view.size
    points = [(x, y), (x + w, y + h // 2), (x, y + h)]
    pygame.draw.polygon(surface, SHIP_COLOR, points, 2)


_DRAWERS = {
    Kind.STAR: _draw_star,
    Kind.DOT: _draw_dot,
    Kind.ASTEROID: _draw_asteroid,
    Kind.BULLET: _draw_bullet,
    Kind.SHIP: _draw_ship,
}


def draw_entities(surface: pygame.Surface, snapshot: Snapshot) -> None:
    for view in snapshot.entities:
        _DRAWERS[view.kind](surface, view)
