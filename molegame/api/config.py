from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from molegame.core.difficulty import DifficultyLevel
from molegame.core.errors import ConfigError
from molegame.core.session import DEFAULT_DURATION_SEC


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    fps: int = 60
    mirror: bool = False


@dataclass
class GameOptions:
    difficulty: DifficultyLevel = DifficultyLevel.HARD
    duration_sec: int = DEFAULT_DURATION_SEC
    rows: int = 3
    cols: int = 3
    seed: Optional[int] = None
    hit_sound: Optional[str] = None
    music: Optional[str] = None

    @property
    def hole_count(self) -> int:
        return self.rows * self.cols

    @classmethod
    def from_manifest(cls, manifest: Optional[Dict[str, Any]]) -> "GameOptions":
        manifest = manifest or {}
        opts = manifest.get("options") or {}
        sounds = manifest.get("sounds") or {}

        try:
            duration = int(opts.get("duration_sec", DEFAULT_DURATION_SEC))
            rows = int(opts.get("rows", 3))
            cols = int(opts.get("cols", 3))
            seed = opts.get("seed")
            seed = None if seed is None else int(seed)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Bad option value in manifest: {exc}") from exc

        if duration <= 0:
            raise ConfigError(f"duration_sec must be positive, got {duration}")
        if rows < 1 or cols < 1 or rows * cols < 2:
            raise ConfigError(f"Board needs at least 2 holes, got {rows}x{cols}")

        return cls(
            difficulty=DifficultyLevel.parse(opts.get("difficulty", "hard")),
            duration_sec=duration,
            rows=rows,
            cols=cols,
            seed=seed,
            hit_sound=sounds.get("hit"),
            music=sounds.get("music"),
        )
