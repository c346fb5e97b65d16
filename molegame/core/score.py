from __future__ import annotations
import logging
from typing import Optional

from .collaborators import Display
from .session import GameSession

logger = logging.getLogger(__name__)


class ScoreTracker:
    def __init__(self, session: GameSession, display: Optional[Display] = None):
        self.session = session
        self.display = display or Display()

    @property
    def score(self) -> int:
        return self.session.score

    def reset(self) -> int:
        self.session.score = 0
        self._publish()
        return self.session.score

    def increment(self) -> int:
        self.session.score += 1
        self._publish()
        return self.session.score

    def _publish(self) -> None:
        try:
            self.display.show_score(self.session.score)
        except Exception as exc:
            logger.warning("Score display failed: %s", exc)
