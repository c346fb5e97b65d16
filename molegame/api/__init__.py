from .game_base import Game
from .frame_data import FrameData, Point
from .config import EngineConfig, GameOptions

__all__ = ["Game", "FrameData", "Point", "EngineConfig", "GameOptions"]
