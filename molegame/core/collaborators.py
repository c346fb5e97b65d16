from __future__ import annotations
from typing import Callable, List


class Display:
    """Where the score and the remaining time end up. Default: nowhere."""

    def show_score(self, score: int) -> None:
        pass

    def show_time(self, seconds: int) -> None:
        pass


class AudioSink:
    """
    Optional sound. Every method is a no-op unless a subclass supports it;
    callers treat all of them as best-effort.
    """

    def play(self) -> None:
        pass

    def pause(self) -> None:
        pass

    def rewind(self) -> None:
        pass


class StartButton:
    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._callbacks: List[Callable[[], object]] = []

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def on_click(self, callback: Callable[[], object]) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def click(self) -> bool:
        """Fire click callbacks. Ignored while disabled."""
        if not self.enabled:
            return False
        for cb in list(self._callbacks):
            cb()
        return True
