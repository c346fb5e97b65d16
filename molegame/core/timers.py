from __future__ import annotations
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple


@dataclass(eq=False)
class TimerHandle:
    callback: Callable[[], object]
    due_ms: float
    interval_ms: Optional[float] = None   # None for one-shot timers
    cancelled: bool = False
    fired: int = 0

    @property
    def repeating(self) -> bool:
        return self.interval_ms is not None

    @property
    def active(self) -> bool:
        return not self.cancelled and (self.repeating or self.fired == 0)

    def cancel(self) -> None:
        self.cancelled = True


class TimerQueue:
    """
    Cooperative, single-threaded timer queue.

    Time only moves when advance() is called (the frame loop feeds it the
    clock.tick() delta). Callbacks run to completion, in due-time order,
    ties broken by scheduling order.
    """

    def __init__(self):
        self._now: float = 0.0
        self._seq = itertools.count()
        self._heap: List[Tuple[float, int, TimerHandle]] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._heap if not h.cancelled)

    def _push(self, handle: TimerHandle) -> None:
        heapq.heappush(self._heap, (handle.due_ms, next(self._seq), handle))

    def call_later(self, delay_ms: float, callback: Callable[[], object]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay must be >= 0, got {delay_ms}")
        handle = TimerHandle(callback=callback, due_ms=self._now + delay_ms)
        self._push(handle)
        return handle

    def call_every(self, interval_ms: float, callback: Callable[[], object]) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval must be > 0, got {interval_ms}")
        handle = TimerHandle(callback=callback, due_ms=self._now + interval_ms,
                             interval_ms=interval_ms)
        self._push(handle)
        return handle

    def cancel(self, handle: Optional[TimerHandle]) -> None:
        if handle is not None:
            handle.cancel()

    def advance(self, dt_ms: float) -> int:
        """Move the clock forward and fire everything that came due. Returns the number fired."""
        if dt_ms < 0:
            raise ValueError(f"cannot move time backwards ({dt_ms})")
        target = self._now + dt_ms
        fired = 0
        while self._heap and self._heap[0][0] <= target:
            due, _, handle = heapq.heappop(self._heap)
            if handle.cancelled:
                continue
            self._now = due
            handle.fired += 1
            if handle.repeating:
                handle.due_ms = due + handle.interval_ms
                self._push(handle)
            handle.callback()
            fired += 1
        self._now = target
        return fired

    def clear(self) -> None:
        for _, _, handle in self._heap:
            handle.cancel()
        self._heap.clear()
