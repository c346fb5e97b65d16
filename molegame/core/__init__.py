from .errors import MoleGameError, InvalidRange, InvalidDifficulty, SessionExpired, ConfigError
from .timers import TimerHandle, TimerQueue
from .random_source import RandomSource
from .difficulty import DifficultyLevel, DifficultyPolicy, set_delay
from .board import Location, TargetSelector, make_locations, toggle_visibility
from .session import GameSession, DEFAULT_DURATION_SEC
from .collaborators import AudioSink, Display, StartButton
from .score import ScoreTracker
from .countdown import CountdownTimer
from .rounds import RoundScheduler, RoundState, GAME_STOPPED
from .controller import GameController, GAME_STARTED

__all__ = [
    "MoleGameError", "InvalidRange", "InvalidDifficulty", "SessionExpired", "ConfigError",
    "TimerHandle", "TimerQueue",
    "RandomSource", "DifficultyLevel", "DifficultyPolicy", "set_delay",
    "Location", "TargetSelector", "make_locations", "toggle_visibility",
    "GameSession", "DEFAULT_DURATION_SEC",
    "AudioSink", "Display", "StartButton",
    "ScoreTracker", "CountdownTimer", "RoundScheduler", "RoundState", "GAME_STOPPED",
    "GameController", "GAME_STARTED",
]
