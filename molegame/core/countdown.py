from __future__ import annotations
import logging
from typing import Callable, Optional

from .timers import TimerHandle, TimerQueue
from .collaborators import Display
from .session import GameSession

logger = logging.getLogger(__name__)

TICK_MS = 1000


class CountdownTimer:
    """
    Counts session.remaining_time down by one every second.

    The repeating tick does not cancel itself when it reaches zero; ticks
    after that change nothing until stop() is called.
    """

    def __init__(
        self,
        session: GameSession,
        timers: TimerQueue,
        display: Optional[Display] = None,
        on_expired: Optional[Callable[[], object]] = None,
        tick_ms: int = TICK_MS,
    ):
        self.session = session
        self.timers = timers
        self.display = display or Display()
        self.on_expired = on_expired
        self.tick_ms = tick_ms
        self.handle: Optional[TimerHandle] = None

    @property
    def running(self) -> bool:
        return self.handle is not None and not self.handle.cancelled

    def start(self) -> TimerHandle:
        self.stop()
        self.handle = self.timers.call_every(self.tick_ms, self.tick)
        return self.handle

    def stop(self, handle: Optional[TimerHandle] = None) -> None:
        handle = handle or self.handle
        self.timers.cancel(handle)
        if handle is self.handle:
            self.handle = None

    def tick(self) -> Optional[int]:
        if self.session.remaining_time <= 0:
            return None
        self.session.remaining_time -= 1
        logger.debug("Tick: %ss left", self.session.remaining_time)
        try:
            self.display.show_time(self.session.remaining_time)
        except Exception as exc:
            logger.warning("Timer display failed: %s", exc)
        if self.session.remaining_time == 0 and self.on_expired is not None:
            self.on_expired()
        return self.session.remaining_time
