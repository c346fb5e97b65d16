from __future__ import annotations


class MoleGameError(Exception):
    """Base class for game errors."""


class InvalidRange(MoleGameError, ValueError):
    def __init__(self, low: int, high: int):
        super().__init__(f"Invalid range: min {low} is greater than max {high}")
        self.low = low
        self.high = high


class InvalidDifficulty(MoleGameError, ValueError):
    def __init__(self, level):
        super().__init__(f"Invalid difficulty level: {level!r}")
        self.level = level


class SessionExpired(MoleGameError, RuntimeError):
    """Raised when a round is requested with no time left on the clock."""


class ConfigError(MoleGameError, ValueError):
    pass
