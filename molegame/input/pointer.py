from __future__ import annotations
import pygame
from typing import List, Tuple

from molegame.api.config import EngineConfig
from molegame.api.frame_data import Point

_BTN_NAME = {1: "left", 2: "middle", 3: "right"}


class PointerInput:
    """
    Click-to-shoot input:
    - Each press of an enabled mouse button queues one shot at the cursor.
    - Shots are handed out once per frame by drain().
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig, buttons: Tuple[str, ...] = ("left",)):
        self.mirror = cfg.mirror
        self.screen_size = cfg.screen_size
        self.buttons = set(buttons)
        self._shots: List[Point] = []

    def _to_logical(self, x: int, y: int) -> Tuple[float, float]:
        if self.mirror:
            w, _ = self.screen_size
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if _BTN_NAME.get(event.button) in self.buttons:
                self._shots.append(Point(*self._to_logical(*event.pos)))
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._shots.clear()

    def drain(self) -> List[Point]:
        shots, self._shots = self._shots, []
        return shots
