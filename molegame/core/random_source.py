from __future__ import annotations
import random
from typing import Optional

from .errors import InvalidRange


class RandomSource:
    """
    Uniform integer source. Pass a seed for reproducible sequences.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    def random_integer(self, low: int, high: int) -> int:
        """Return an int in [low, high], both ends included."""
        if low > high:
            raise InvalidRange(low, high)
        return self._rng.randint(low, high)
