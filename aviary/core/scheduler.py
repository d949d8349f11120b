from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Protocol, Tuple


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        ...


class VirtualScheduler:
    """Scheduler driven by :meth:`advance` instead of wall-clock time.

    Callbacks due at the same instant run in the order they were scheduled.
    Callbacks scheduled while advancing run in the same call if they fall
    inside the window.
    """

    def __init__(self) -> None:
        self._now_ms = 0
        self._seq = itertools.count()
        self._queue: List[Tuple[int, int, Callable[[], None]]] = []

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        due = self._now_ms + max(0, int(delay_ms))
        heapq.heappush(self._queue, (due, next(self._seq), callback))

    def advance(self, ms: int) -> None:
        target = self._now_ms + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self._now_ms = due
            callback()
        self._now_ms = target

    def run_all(self) -> None:
        """Fire everything pending, including callbacks they schedule."""
        while self._queue:
            self.advance(self._queue[0][0] - self._now_ms)
