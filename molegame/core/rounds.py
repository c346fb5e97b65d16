from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Optional, Sequence, Union

from .timers import TimerHandle, TimerQueue
from .board import Location, TargetSelector, toggle_visibility
from .difficulty import DifficultyPolicy
from .errors import SessionExpired
from .session import GameSession

logger = logging.getLogger(__name__)

GAME_STOPPED = "game stopped"


class RoundState(Enum):
    Idle = 1
    Showing = 2
    Hidden = 3
    Stopped = 4


class RoundScheduler:
    """
    Drives the show/hide cycle.

    Each round shows a mole at a fresh location for a difficulty-dependent
    delay, then hides it and either starts the next round or, once the clock
    has run out, calls on_stop.
    """

    def __init__(
        self,
        session: GameSession,
        locations: Sequence[Location],
        timers: TimerQueue,
        policy: DifficultyPolicy,
        selector: TargetSelector,
        on_stop: Callable[[], object],
    ):
        self.session = session
        self.locations = locations
        self.timers = timers
        self.policy = policy
        self.selector = selector
        self.on_stop = on_stop

        self.state = RoundState.Idle
        self.handle: Optional[TimerHandle] = None
        self.target: Optional[Location] = None
        self.delay_ms: int = 0
        self.rounds_played = 0

    def reset(self) -> None:
        self.cancel()
        self.state = RoundState.Idle
        self.rounds_played = 0

    def begin_round(self) -> TimerHandle:
        if not self.session.has_time:
            raise SessionExpired("No time left to begin a round")
        delay = self.policy.delay_for(self.session.difficulty)
        target = self.selector.choose(self.locations, self.session)
        return self.show_and_hide(target, delay)

    def show_and_hide(self, target: Location, delay: int) -> TimerHandle:
        if self.state is RoundState.Showing:
            # a new round replaces the one on screen
            self.timers.cancel(self.handle)
            if self.target is not None and self.target.visible:
                toggle_visibility(self.target)
        toggle_visibility(target)
        self.target = target
        self.delay_ms = delay
        self.state = RoundState.Showing
        self.rounds_played += 1
        logger.debug("Round %d: hole %d for %d ms", self.rounds_played, target.index, delay)

        handle: Optional[TimerHandle] = None

        def _hide() -> None:
            # stale callback from a cancelled or superseded round
            if handle is not self.handle or self.state is not RoundState.Showing:
                return
            toggle_visibility(target)
            self.target = None
            self.handle = None
            self.state = RoundState.Hidden
            if self.session.has_time:
                self.begin_round()
            else:
                self.state = RoundState.Stopped
                self.on_stop()

        handle = self.timers.call_later(delay, _hide)
        self.handle = handle
        return handle

    def game_over(self) -> Union[TimerHandle, str]:
        """Next round while there is time, otherwise stop the game."""
        if self.session.has_time:
            return self.begin_round()
        self.state = RoundState.Stopped
        self.on_stop()
        return GAME_STOPPED

    def cancel(self) -> None:
        self.timers.cancel(self.handle)
        self.handle = None
        if self.target is not None and self.target.visible:
            toggle_visibility(self.target)
        self.target = None
        self.state = RoundState.Stopped
