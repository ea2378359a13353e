"""Player intents, queued between ticks and applied at the start of the next."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Fire:
    pass


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


Intent = Union[Fire, MoveUp, MoveDown]
INTENTS = (Fire, MoveUp, MoveDown)


class IntentQueue:
    """FIFO of intents waiting for the next tick.

    ``push`` may be called from the host's input thread; deque append and
    popleft are atomic, so the tick sees each intent exactly once.
    """

    def __init__(self) -> None:
        self._pending: deque[Intent] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def push(self, intent: Intent) -> None:
        if not isinstance(intent, INTENTS):
            raise TypeError(f"Unsupported intent {type(intent).__qualname__}")
        self._pending.append(intent)

    def drain(self) -> list[Intent]:
        """Remove and return every queued intent, oldest first."""
        drained: list[Intent] = []
        while self._pending:
            drained.append(self._pending.popleft())
        return drained

    def clear(self) -> None:
        self._pending.clear()
