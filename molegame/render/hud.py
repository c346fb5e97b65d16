from __future__ import annotations
from typing import Optional

from molegame.core.collaborators import Display


class HudDisplay(Display):
    """Keeps the latest score/time for the game to draw each frame."""

    def __init__(self):
        self.score: int = 0
        self.time_left: Optional[int] = None

    def show_score(self, score: int) -> None:
        self.score = score

    def show_time(self, seconds: int) -> None:
        self.time_left = seconds

    def text(self) -> str:
        t = "-" if self.time_left is None else f"{self.time_left}s"
        return f"Score: {self.score} | Time: {t}"
