"""Short-lived screen effects driven by gameplay signals."""
from __future__ import annotations

from typing import Any

import pygame

from tick_asteroids import DAMAGE, DEATH, HIT

FLASH_FRAMES = {HIT: 3, DAMAGE: 6, DEATH: 20}
FLASH_COLORS = {
    HIT: (255, 160, 0, 40),
    DAMAGE: (255, 0, 0, 70),
    DEATH: (255, 255, 255, 120),
}


class SignalFlash:
    """Subscribes to hit/damage/death and tints the next few frames."""

    def __init__(self) -> None:
        self._signal: str | None = None
        self._frames_left = 0

    def __call__(self, signal_name: str, data: dict[str, Any]) -> None:
        # Keep whichever flash lasts longer.
        if self._frames_left and FLASH_FRAMES[signal_name] < self._frames_left:
            return
        self._signal = signal_name
        self._frames_left = FLASH_FRAMES[signal_name]

    def draw(self, surface: pygame.Surface) -> None:
        if not self._frames_left or self._signal is None:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(FLASH_COLORS[self._signal])
        surface.blit(overlay, (0, 0))
        self._frames_left -= 1
