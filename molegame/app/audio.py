from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import pygame

from molegame.core.collaborators import AudioSink

logger = logging.getLogger(__name__)


class SoundSink(AudioSink):
    """Short effect backed by pygame.mixer.Sound. play() always starts from the top."""

    def __init__(self, sound: pygame.mixer.Sound):
        self.sound = sound
        self._channel: Optional[pygame.mixer.Channel] = None

    def play(self) -> None:
        self._channel = self.sound.play()

    def pause(self) -> None:
        if self._channel is not None:
            self._channel.pause()

    def rewind(self) -> None:
        self.sound.stop()
        self._channel = None


class MusicSink(AudioSink):
    """Looping background track on pygame.mixer.music."""

    def __init__(self, path: Path, loops: int = -1):
        self.path = path
        self.loops = loops
        pygame.mixer.music.load(str(path))

    def play(self) -> None:
        pygame.mixer.music.play(self.loops)

    def pause(self) -> None:
        pygame.mixer.music.pause()

    def rewind(self) -> None:
        pygame.mixer.music.rewind()


def _resolve(path: Optional[str], base: Optional[Path]) -> Optional[Path]:
    if not path:
        return None
    p = Path(path)
    if not p.is_absolute() and base is not None:
        p = base / p
    if not p.exists():
        logger.warning("Sound file not found: %s", p)
        return None
    return p


def load_sound(path: Optional[str], base: Optional[Path] = None) -> AudioSink:
    """Returns a silent sink when the mixer is down or the file is missing."""
    p = _resolve(path, base)
    if p is None or not pygame.mixer.get_init():
        return AudioSink()
    try:
        return SoundSink(pygame.mixer.Sound(str(p)))
    except pygame.error as exc:
        logger.warning("Could not load sound %s: %s", p, exc)
        return AudioSink()


def load_music(path: Optional[str], base: Optional[Path] = None) -> AudioSink:
    p = _resolve(path, base)
    if p is None or not pygame.mixer.get_init():
        return AudioSink()
    try:
        return MusicSink(p)
    except pygame.error as exc:
        logger.warning("Could not load music %s: %s", p, exc)
        return AudioSink()
