from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .board import Location
from .difficulty import DifficultyLevel

DEFAULT_DURATION_SEC = 10


@dataclass
class GameSession:
    """Mutable state of one play-through; reset when a new game starts."""
    difficulty: DifficultyLevel = DifficultyLevel.HARD
    remaining_time: int = 0
    score: int = 0
    last_location: Optional[Location] = None

    def reset(self) -> None:
        self.remaining_time = 0
        self.score = 0
        self.last_location = None

    @property
    def has_time(self) -> bool:
        return self.remaining_time > 0
