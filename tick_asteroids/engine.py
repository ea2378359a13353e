"""Game - the fixed-interval loop that owns a session's state."""
from __future__ import annotations

import logging
import os
import random
import time
from typing import Callable

from tick_asteroids.clock import Clock
from tick_asteroids.collision import resolve_collisions
from tick_asteroids.commands import INTENTS, Fire, Intent, IntentQueue, MoveDown, MoveUp
from tick_asteroids.config import GameConfig
from tick_asteroids.lifecycle import prune_bullets, spawn_bullet
from tick_asteroids.signals import Handler, SignalBus
from tick_asteroids.spawn import build_state
from tick_asteroids.state import GameState, Snapshot
from tick_asteroids.types import Phase, SessionFailedError

logger = logging.getLogger(__name__)

SnapshotHook = Callable[[Snapshot], None]


class Game:
    """One play session.

    Each ``step()`` is exactly one simulation step regardless of how late it
    arrives: drain intents, move everything, resolve collisions, prune
    bullets, flush signals, then hand a snapshot to the render hooks. When a
    step kills the ship the terminal hooks get the final snapshot instead,
    once, and later steps do nothing.
    """

    def __init__(
        self,
        width: int,
        height: int,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        config = config or GameConfig()
        seed = _resolve_seed(seed)
        rng = random.Random(seed)
        self._setup(build_state(config, width, height, rng), config, rng, seed)
        logger.info(
            "session started: %dx%d, %d objects per kind, seed %d",
            width,
            height,
            config.object_count,
            seed,
        )

    @classmethod
    def from_state(
        cls,
        state: GameState,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> Game:
        """Wrap an already built state, e.g. a hand-placed scenario."""
        game = cls.__new__(cls)
        seed = _resolve_seed(seed)
        game._setup(state, config or GameConfig(), random.Random(seed), seed)
        return game

    def _setup(
        self,
        state: GameState,
        config: GameConfig,
        rng: random.Random,
        seed: int,
    ) -> None:
        self._config = config
        self._state = state
        self._seed = seed
        self._rng = rng
        self._clock = Clock(config.tick_interval_ms)
        self._bus = SignalBus()
        self._intents = IntentQueue()
        self._render_hooks: list[SnapshotHook] = []
        self._terminal_hooks: list[SnapshotHook] = []
        self._start_hooks: list[SnapshotHook] = []
        self._stop_hooks: list[SnapshotHook] = []
        self._terminal_notified = False
        self._stop_requested = False
        self._in_tick = False
        self._failure: Exception | None = None

    # ── Accessors ─────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def terminal(self) -> bool:
        return self._state.terminal

    def snapshot(self) -> Snapshot:
        return self._state.snapshot(self._clock.tick_number)

    # ── Hooks and signals ─────────────────────────────────────────

    def on_render(self, hook: SnapshotHook) -> None:
        self._render_hooks.append(hook)

    def on_terminal(self, hook: SnapshotHook) -> None:
        self._terminal_hooks.append(hook)

    def on_start(self, hook: SnapshotHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: SnapshotHook) -> None:
        self._stop_hooks.append(hook)

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._bus.subscribe(signal_name, handler)

    # ── Intents ───────────────────────────────────────────────────

    def submit(self, intent: Intent) -> bool:
        """Queue an intent for the next tick. Ignored once the session ended."""
        if not isinstance(intent, INTENTS):
            raise TypeError(f"Unsupported intent {type(intent).__qualname__}")
        if not self._state.running:
            logger.debug("ignoring %s, session is %s", intent, self._state.phase.value)
            return False
        self._intents.push(intent)
        return True

    def fire(self) -> bool:
        return self.submit(Fire())

    def move_up(self) -> bool:
        return self.submit(MoveUp())

    def move_down(self) -> bool:
        return self.submit(MoveDown())

    def _apply(self, intent: Intent) -> None:
        state = self._state
        match intent:
            case Fire():
                if spawn_bullet(state, self._config) is None:
                    logger.debug("fire ignored, %d bullets in flight", len(state.bullets))
            case MoveUp():
                state.ship.up(state.bounds)
            case MoveDown():
                state.ship.down(state.bounds)

    # ── Loop ──────────────────────────────────────────────────────

    def request_stop(self) -> None:
        self._stop_requested = True

    def step(self) -> bool:
        """Run one tick. Returns True while the session is still running.

        Raises SessionFailedError if this or an earlier tick raised; the
        session cannot continue from a half-applied tick. Raises
        RuntimeError when called from a hook or signal handler of the tick
        in progress.
        """
        if self._in_tick:
            raise RuntimeError("step() called re-entrantly")
        if self._state.phase is Phase.FAILED:
            raise SessionFailedError("session already failed") from self._failure
        if self._state.phase is Phase.TERMINAL:
            return False
        self._in_tick = True
        try:
            self._tick()
        except Exception as exc:
            self._state.phase = Phase.FAILED
            self._failure = exc
            self._intents.clear()
            self._bus.clear()
            logger.exception("tick %d failed, aborting session", self._clock.tick_number)
            raise SessionFailedError(f"tick {self._clock.tick_number} failed") from exc
        finally:
            self._in_tick = False
        return self._state.running

    def _tick(self) -> None:
        tick_number = self._clock.advance()
        state = self._state
        bounds = state.bounds

        for intent in self._intents.drain():
            self._apply(intent)

        for entity in state.background:
            entity.update(bounds, self._rng)
        for bullet in state.bullets:
            bullet.update(bounds, self._rng)
        state.ship.update(bounds, self._rng)

        result = resolve_collisions(
            state, self._bus, self._rng, self._config.damage_range, tick_number
        )
        if result.bullet_hits or result.ship_hits:
            logger.debug(
                "tick %d: %d bullet hits, %d ship hits, %d damage",
                tick_number,
                result.bullet_hits,
                result.ship_hits,
                result.damage,
            )
        prune_bullets(state.bullets)
        delivered = self._bus.flush()
        if delivered:
            logger.debug(
                "tick %d delivered %s", tick_number, [name for name, _ in delivered]
            )

        snapshot = state.snapshot(tick_number)
        if state.terminal:
            self._notify_terminal(snapshot)
            return
        for hook in self._render_hooks:
            hook(snapshot)

    def _notify_terminal(self, snapshot: Snapshot) -> None:
        if self._terminal_notified:
            return
        self._terminal_notified = True
        logger.info("game over on tick %d", snapshot.tick_number)
        for hook in self._terminal_hooks:
            hook(snapshot)

    def run(self, n: int) -> int:
        """Run up to *n* ticks back to back. Returns the ticks actually run."""
        self._stop_requested = False
        self._fire(self._start_hooks)
        ran = 0
        try:
            for _ in range(n):
                if not self._state.running:
                    break
                self.step()
                ran += 1
                if self._stop_requested:
                    break
        finally:
            self._fire(self._stop_hooks)
        return ran

    def run_forever(self) -> None:
        """Tick at the configured interval until terminal or stopped.

        Late ticks are not caught up: each loop iteration is one step, and the
        sleep only fills whatever is left of the interval.
        """
        self._stop_requested = False
        self._fire(self._start_hooks)
        interval = self._clock.interval
        try:
            while not self._stop_requested and self._state.running:
                start = time.monotonic()
                if not self.step() or self._stop_requested:
                    break
                sleep_time = interval - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        finally:
            self._fire(self._stop_hooks)

    def _fire(self, hooks: list[SnapshotHook]) -> None:
        if not hooks:
            return
        snapshot = self.snapshot()
        for hook in hooks:
            hook(snapshot)


def _resolve_seed(seed: int | None) -> int:
    if seed is None:
        return int.from_bytes(os.urandom(8))
    return seed
