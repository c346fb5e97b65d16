from __future__ import annotations
import logging
import time
from typing import Any, Dict

import pygame

from molegame.api.config import EngineConfig
from molegame.api.frame_data import FrameData
from molegame.app.context import Context
from molegame.app.loader import apply_overrides, game_root_for, load_game_manifest, load_game_module
from molegame.input.pointer import PointerInput

logger = logging.getLogger(__name__)


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    mirror: bool = False,
    fps: int = 60,
    overrides: Dict[str, Any] | None = None,
):
    game_root = game_root_for(game_id)
    manifest = apply_overrides(load_game_manifest(game_root), **(overrides or {}))
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.init()
    try:
        pygame.mixer.init()
    except pygame.error as exc:
        logger.warning("Audio unavailable, playing without sound: %s", exc)
    pygame.display.set_caption(f"Mole Platform – {manifest.get('name', game_id)}")
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    cfg = EngineConfig(screen_size=screen_size, fps=fps, mirror=mirror)
    pointer = PointerInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        screen_size=screen_size,
        resources={"game_root": game_root},
    )

    game.on_load(ctx, manifest)
    logger.info("Loaded game %s (%dx%d)", game_id, *screen_size)

    running = True
    try:
        while running:
            dt = clock.tick(fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                pointer.handle_pygame_event(event)
                game.on_event(event)

            frame_data = FrameData(timestamp=time.time(), shots=pointer.drain())

            # ---- draw to render_surface ----
            render_surface.fill((12, 14, 18))
            game.on_update(dt, frame_data)
            game.on_draw(render_surface)
            pygame.draw.rect(render_surface, (220, 220, 220),
                             (8, 8, screen_size[0] - 16, screen_size[1] - 16), 1)

            # ---- present to window ----
            if mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
