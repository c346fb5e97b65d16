from __future__ import annotations
from enum import Enum
from typing import List, Optional

import pygame

from molegame.api import Game, FrameData, GameOptions
from molegame.app.audio import load_music, load_sound
from molegame.core.timers import TimerQueue
from molegame.core import GameController, Location, RandomSource, StartButton, make_locations
from molegame.input.hit_test import BoardLayout
from molegame.render.hud import HudDisplay
from molegame.render.shapes import draw_ring, draw_text


# Start screen
START_TARGET_RADIUS = 70           # px for the "shoot here" target

# UX
EDGE_MARGIN = 24                   # keep holes off the edges
HUD_TOP = 80                       # room for the scoreboard
HUD_COLOR = (230, 230, 230)
HOLE_COLOR = (60, 45, 35)
MOLE_COLOR = (50, 200, 120)
START_TARGET_COLOR = (70, 180, 110)
START_TARGET_DISABLED_COLOR = (90, 90, 90)


class GameState(Enum):
    Start = 1
    Playing = 2
    Finished = 3


class WhackAMole(Game):
    def on_load(self, ctx, manifest):
        self.ctx = ctx
        self.manifest = manifest
        self.options = GameOptions.from_manifest(manifest)

        w, h = ctx.screen_size
        self.start_center = (w // 2, h // 2)
        self.layout = BoardLayout(ctx.screen_size, rows=self.options.rows, cols=self.options.cols,
                                  margin=EDGE_MARGIN, top=HUD_TOP)
        self.locations: List[Location] = make_locations(len(self.layout))
        self.timers = TimerQueue()
        self.hud = HudDisplay()
        self.start_button = StartButton()

        game_root = ctx.resources.get("game_root")
        self.controller = GameController(
            self.locations,
            self.timers,
            difficulty=self.options.difficulty,
            duration=self.options.duration_sec,
            display=self.hud,
            start_button=self.start_button,
            hit_sound=load_sound(self.options.hit_sound, game_root),
            background_music=load_music(self.options.music, game_root),
            rng=RandomSource(self.options.seed),
        )
        self.start_button.on_click(self.controller.start)
        self.games_played = 0

    # ------------- helpers -------------
    @property
    def state(self) -> GameState:
        if self.controller.running:
            return GameState.Playing
        return GameState.Finished if self.games_played else GameState.Start

    def press_start(self) -> bool:
        started = self.start_button.click()
        if started:
            self.games_played += 1
        return started

    def _on_start_target(self, frame: FrameData) -> bool:
        cx, cy = self.start_center
        r2 = START_TARGET_RADIUS * START_TARGET_RADIUS
        return any((p.x - cx) ** 2 + (p.y - cy) ** 2 <= r2 for p in frame.shots)

    def _mole_time_left(self) -> float:
        handle = self.controller.rounds.handle
        delay = self.controller.rounds.delay_ms
        if handle is None or delay <= 0:
            return 0.0
        return max(0.0, handle.due_ms - self.timers.now) / delay

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        if self.state != GameState.Playing:
            if self._on_start_target(frame):
                self.press_start()
        elif frame.shots:
            # only a shown mole can be clicked
            shown = [loc.index for loc in self.locations if loc.visible]
            idx: Optional[int] = self.layout.hit_test(frame.shots, shown)
            if idx is not None:
                self.locations[idx].hit()

        self.timers.advance(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        if self.state != GameState.Playing:
            self._draw_start_screen(surface)
            return

        draw_text(surface, self.hud.text(), (20, 16), HUD_COLOR, size=32)
        draw_text(surface, f"Difficulty: {self.controller.difficulty.value}", (20, 48),
                  (180, 180, 180), size=22)

        r = int(self.layout.radius)
        for loc in self.locations:
            center = self.layout.center(loc.index)
            pygame.draw.circle(surface, HOLE_COLOR, center, r, width=0)
            if loc.visible:
                pygame.draw.circle(surface, MOLE_COLOR, center, int(r * 0.8), width=0)
                draw_ring(surface, center, r + 8, self._mole_time_left())

    def _draw_start_screen(self, surface: pygame.Surface) -> None:
        cx, cy = self.start_center

        draw_text(surface, "Whack-a-Mole", (20, 20), HUD_COLOR, size=32)
        draw_text(surface, "Click the target (or press SPACE) to start",
                  (20, 60), (210, 210, 210), size=22)
        if self.state == GameState.Finished:
            draw_text(surface, f"Time's up! Final score: {self.controller.score}",
                      (20, 92), (240, 220, 120), size=26)

        color = START_TARGET_COLOR if self.start_button.enabled else START_TARGET_DISABLED_COLOR
        pygame.draw.circle(surface, color, (cx, cy), START_TARGET_RADIUS, width=4)
        draw_text(surface, "Start", (cx - 28, cy - 10), (240, 240, 240), size=30)

    def on_event(self, event: pygame.event.Event) -> None:
        # Keyboard fallback: space/enter starts
        if self.state != GameState.Playing and event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self.press_start()

    def on_unload(self) -> None:
        self.controller.stop()
        self.timers.clear()


def get_game():
    return WhackAMole()
