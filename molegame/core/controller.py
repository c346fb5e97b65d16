from __future__ import annotations
import logging
from typing import Callable, List, Optional, Sequence, Union

from .timers import TimerHandle, TimerQueue
from .board import Location, TargetSelector, toggle_visibility
from .collaborators import AudioSink, Display, StartButton
from .countdown import CountdownTimer
from .difficulty import DifficultyLevel, DifficultyPolicy
from .random_source import RandomSource
from .rounds import GAME_STOPPED, RoundScheduler
from .score import ScoreTracker
from .session import DEFAULT_DURATION_SEC, GameSession

logger = logging.getLogger(__name__)

GAME_STARTED = "game started"


def _best_effort(what: str, action: Callable[[], object]) -> None:
    try:
        action()
    except Exception as exc:
        logger.warning("%s failed: %s", what, exc)


class GameController:
    """
    Owns the session and wires the pieces together:
    start -> countdown + round loop -> stop once the clock runs out.

    Every collaborator (display, start button, sounds) is optional. Failures
    in them are logged and never interrupt the game.
    """

    def __init__(
        self,
        locations: Sequence[Location],
        timers: TimerQueue,
        difficulty: Union[DifficultyLevel, str] = DifficultyLevel.HARD,
        duration: int = DEFAULT_DURATION_SEC,
        display: Optional[Display] = None,
        start_button: Optional[StartButton] = None,
        hit_sound: Optional[AudioSink] = None,
        background_music: Optional[AudioSink] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.locations: List[Location] = list(locations)
        self.timers = timers
        self.duration = duration
        self.display = display or Display()
        self.start_button = start_button or StartButton()
        self.hit_sound = hit_sound or AudioSink()
        self.background_music = background_music or AudioSink()
        self.rng = rng or RandomSource()

        self.session = GameSession(difficulty=DifficultyLevel.parse(difficulty))
        self.policy = DifficultyPolicy(self.rng)
        self.selector = TargetSelector(self.rng)
        self.scores = ScoreTracker(self.session, self.display)
        self.countdown = CountdownTimer(self.session, timers, self.display,
                                        on_expired=self._on_time_up)
        self.rounds = RoundScheduler(self.session, self.locations, timers,
                                     self.policy, self.selector, on_stop=self.stop)
        self.running = False

    # ------------- read-only state -------------
    @property
    def score(self) -> int:
        return self.session.score

    @property
    def remaining_time(self) -> int:
        return self.session.remaining_time

    @property
    def difficulty(self) -> DifficultyLevel:
        return self.session.difficulty

    # ------------- building blocks -------------
    def random_integer(self, low: int, high: int) -> int:
        return self.rng.random_integer(low, high)

    def set_delay(self, level: Union[DifficultyLevel, str, None] = None) -> int:
        return self.policy.delay_for(self.session.difficulty if level is None else level)

    def choose_hole(self, locations: Optional[Sequence[Location]] = None) -> Location:
        return self.selector.choose(self.locations if locations is None else locations,
                                    self.session)

    def toggle_visibility(self, location: Location) -> Location:
        return toggle_visibility(location)

    def set_duration(self, seconds: int) -> int:
        if seconds < 0:
            raise ValueError(f"duration must be >= 0, got {seconds}")
        self.session.remaining_time = seconds
        _best_effort("Timer display", lambda: self.display.show_time(seconds))
        return self.session.remaining_time

    def clear_score(self) -> int:
        return self.scores.reset()

    def update_score(self) -> int:
        return self.scores.increment()

    def set_event_listeners(self) -> List[Location]:
        for location in self.locations:
            location.add_hit_listener(self.on_hit)
        return self.locations

    def start_timer(self) -> TimerHandle:
        return self.countdown.start()

    def show_up(self) -> TimerHandle:
        return self.rounds.begin_round()

    def game_over(self) -> Union[TimerHandle, str]:
        return self.rounds.game_over()

    # ------------- game lifecycle -------------
    def start(self) -> str:
        if self.running:
            logger.info("Restarting game in progress")
        self.countdown.stop()
        self.rounds.reset()
        self.session.reset()

        self.clear_score()
        self.set_duration(self.duration)
        self.set_event_listeners()
        self.start_timer()
        self.running = True
        _best_effort("Start button disable", self.start_button.disable)
        logger.info("Game started: difficulty=%s duration=%ss",
                    self.session.difficulty.value, self.duration)

        # a zero-length game stops right here
        self.game_over()
        if self.running:
            _best_effort("Background music play", self.background_music.play)
        return GAME_STARTED

    def stop(self) -> str:
        was_running = self.running
        self.running = False
        self.countdown.stop()
        self.rounds.cancel()
        for location in self.locations:
            location.hide()
        _best_effort("Start button enable", self.start_button.enable)
        _best_effort("Background music pause", self.background_music.pause)
        _best_effort("Background music rewind", self.background_music.rewind)
        if was_running:
            logger.info("Game stopped: score=%d", self.session.score)
        return GAME_STOPPED

    def on_hit(self, location: Optional[Location] = None) -> int:
        """Count a hit. Any hit counts, shown mole or not."""
        score = self.update_score()
        _best_effort("Hit sound rewind", self.hit_sound.rewind)
        _best_effort("Hit sound play", self.hit_sound.play)
        return score

    whack = on_hit

    def _on_time_up(self) -> None:
        logger.debug("Time is up; stopping after the current round")
