"""Server-side wall clock for broadcast timestamps."""

from __future__ import annotations

import time
from collections.abc import Callable

TimeFn = Callable[[], float]


class ServerClock:
    """Millisecond epoch timestamps that never go backwards.

    Wall-clock steps (NTP corrections) would otherwise let a later broadcast
    carry an earlier timestamp; the last issued value is held instead.
    """

    def __init__(self, *, now_fn: TimeFn | None = None) -> None:
        self._now = now_fn or time.time
        self._last_ms = 0

    def now_ms(self) -> int:
        current = int(self._now() * 1000)
        if current < self._last_ms:
            return self._last_ms
        self._last_ms = current
        return current


__all__ = ["ServerClock", "TimeFn"]
