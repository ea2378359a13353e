"""Asteroids - pygame front-end for tick-asteroids.

Draws the snapshot, turns keys into intents and paces ticks with an
accumulator at the configured tick interval.

Controls:
  Space       Fire
  Up / Down   Move the ship
  R           Restart after game over
  Escape      Quit
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import pygame

from tick_asteroids import DAMAGE, DEATH, HIT, Game, GameConfig, Snapshot
from ui.draw import draw_entities
from ui.effects import SignalFlash
from ui.hud import draw_energy, draw_fps, draw_game_over

TITLE = "Asteroids - tick-asteroids"
FPS = 60
BG_COLOR = (0, 0, 0)

logger = logging.getLogger("asteroids")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Asteroids - tick-asteroids demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--width", type=int, default=800)
    p.add_argument("--height", type=int, default=600)
    p.add_argument("--tick-ms", type=int, default=50, help="Tick interval (default: 50)")
    p.add_argument("--objects", type=int, default=30, help="Objects per kind (default: 30)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def build_game(args: argparse.Namespace, width: int, height: int, flash: SignalFlash) -> Game:
    config = dataclasses.replace(
        GameConfig(), tick_interval_ms=args.tick_ms, object_count=args.objects
    )
    game = Game(width, height, config=config, seed=args.seed)
    for name in (HIT, DAMAGE, DEATH):
        game.subscribe(name, flash)
    game.subscribe(DAMAGE, lambda _, data: logger.info("hit for %(amount)d, energy %(energy)d", data))
    return game


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption(TITLE)
    pygame.key.set_repeat(120, 40)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    # Bounds come from the real drawable surface, not the requested size.
    width, height = screen.get_size()
    flash = SignalFlash()
    game = build_game(args, width, height, flash)
    final: list[Snapshot] = []
    game.on_terminal(final.append)

    tick_acc = 0.0
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    game.fire()
                elif event.key == pygame.K_UP:
                    game.move_up()
                elif event.key == pygame.K_DOWN:
                    game.move_down()
                elif event.key == pygame.K_r and game.terminal:
                    game = build_game(args, width, height, flash)
                    final.clear()
                    game.on_terminal(final.append)
                    tick_acc = 0.0

        # --- Update (tick accumulator) ---
        if not game.terminal:
            tick_acc += dt
            interval = game.clock.interval
            while tick_acc >= interval and game.step():
                tick_acc -= interval

        # --- Draw ---
        snapshot = final[0] if final else game.snapshot()
        screen.fill(BG_COLOR)
        draw_entities(screen, snapshot)
        flash.draw(screen)
        draw_fps(screen, font, pg_clock.get_fps())
        draw_energy(screen, font, snapshot, game.config.ship_energy)
        if snapshot.terminal:
            draw_game_over(screen, snapshot)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
