"""HUD overlays: FPS, energy bar, game-over banner."""
from __future__ import annotations

import pygame

from tick_asteroids import Snapshot

HUD_COLOR = (0, 255, 255)
BAR_BG = (60, 60, 60)
BAR_FG = (0, 200, 80)
BAR_LOW = (220, 50, 50)
BAR_W = 120
BAR_H = 8


def draw_fps(surface: pygame.Surface, font: pygame.font.Font, fps: float) -> None:
    surface.blit(font.render(f"FPS: {fps:.0f}", True, HUD_COLOR), (5, 5))


def draw_energy(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snapshot: Snapshot,
    max_energy: int,
) -> None:
    x = snapshot.width - BAR_W - 10
    label = font.render(f"Energy {snapshot.energy}", True, HUD_COLOR)
    surface.blit(label, (x, 5))
    pygame.draw.rect(surface, BAR_BG, (x, 24, BAR_W, BAR_H))
    frac = snapshot.energy / max_energy if max_energy else 0.0
    color = BAR_LOW if frac < 0.25 else BAR_FG
    pygame.draw.rect(surface, color, (x, 24, int(BAR_W * frac), BAR_H))


def draw_game_over(surface: pygame.Surface, snapshot: Snapshot) -> None:
    overlay = pygame.Surface((snapshot.width, snapshot.height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    surface.blit(overlay, (0, 0))

    big_font = pygame.font.SysFont("monospace", 40, bold=True)
    text = big_font.render("GAME OVER", True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(snapshot.width // 2, snapshot.height // 2)))

    small = pygame.font.SysFont("monospace", 14)
    hint = small.render("R to restart, Escape to quit", True, (180, 180, 180))
    surface.blit(
        hint, hint.get_rect(center=(snapshot.width // 2, snapshot.height // 2 + 36))
    )
