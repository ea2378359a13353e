"""Discrete gameplay signals, queued during a tick and flushed at its end."""
from __future__ import annotations

from typing import Any, Callable

HIT = "hit"
DAMAGE = "damage"
DEATH = "death"

_KNOWN = frozenset((HIT, DAMAGE, DEATH))

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Hit, damage and death notifications with per-tick delivery.

    ``publish`` only queues; handlers run when the game loop calls ``flush``
    after collisions are resolved, so every handler sees the finished tick.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        if signal_name not in _KNOWN:
            raise ValueError(f"Unknown signal {signal_name!r}")
        self._subscribers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        if signal_name not in _KNOWN:
            raise ValueError(f"Unknown signal {signal_name!r}")
        self._queue.append((signal_name, data))

    def flush(self) -> list[tuple[str, dict[str, Any]]]:
        """Deliver queued signals in publish order and return them."""
        delivered = self._queue
        self._queue = []
        for signal_name, data in delivered:
            for handler in self._subscribers.get(signal_name, []):
                handler(signal_name, data)
        return delivered

    def clear(self) -> None:
        self._queue.clear()
