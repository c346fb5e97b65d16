from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float


@dataclass
class FrameData:
    timestamp: float
    # pointer shots fired this frame, already in logical screen coords
    shots: List[Point] = field(default_factory=list)
