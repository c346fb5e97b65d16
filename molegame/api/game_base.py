from __future__ import annotations

import pygame

from molegame.app.context import Context

from .frame_data import FrameData


class Game:
    """
    What the frame loop drives. One instance per run, built by the game
    module's get_game() factory.

    Games own their TimerQueue: the loop never touches it, so anything
    scheduled with call_later/call_every only fires once on_update advances
    the queue by dt_ms.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Build state from the manifest; ctx.resources["game_root"] locates assets."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        """
        Once per frame. Handle frame.shots (clicks since the last frame),
        then advance the game's timers by dt_ms.
        """
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        # Mouse clicks already arrive as frame.shots; this is for keys.
        ...

    def on_unload(self) -> None:
        """Stop anything still running (round timers, music)."""
        ...
