from __future__ import annotations
from enum import Enum
from typing import Optional, Union

from .errors import InvalidDifficulty
from .random_source import RandomSource

EASY_DELAY_MS = 1500
NORMAL_DELAY_MS = 1000
HARD_DELAY_RANGE_MS = (600, 1200)


class DifficultyLevel(Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["DifficultyLevel", str]) -> "DifficultyLevel":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDifficulty(value)


class DifficultyPolicy:
    """
    Maps a difficulty level to how long a mole stays up, in milliseconds.
    Hard draws a fresh random delay on every call.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or RandomSource()

    def delay_for(self, level: Union[DifficultyLevel, str]) -> int:
        level = DifficultyLevel.parse(level)
        if level is DifficultyLevel.EASY:
            return EASY_DELAY_MS
        if level is DifficultyLevel.NORMAL:
            return NORMAL_DELAY_MS
        return self.rng.random_integer(*HARD_DELAY_RANGE_MS)


def set_delay(level: Union[DifficultyLevel, str], rng: Optional[RandomSource] = None) -> int:
    return DifficultyPolicy(rng).delay_for(level)
