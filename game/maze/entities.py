"""
Game entity dataclasses
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .utils import Rect


class GameState(Enum):
    """Screen / round state, exactly one active at a time"""
    TITLE = "title"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class Player:
    """Player sprite, moves in whole grid steps"""
    x: float
    y: float
    size: float = 30.0
    speed: float = 40.0  # px per move
    energy: int = 100
    steps: int = 0

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)


@dataclass
class Goal:
    """Goal tile; pulse_size only drives the glow"""
    x: float
    y: float
    size: float = 40.0
    pulse_size: float = 0.0

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)

    def pulse(self, now: float) -> float:
        """Update the glow offset from wall-clock seconds"""
        self.pulse_size = math.sin(now * 1000.0 / 200.0) * 5.0
        return self.pulse_size


@dataclass(frozen=True)
class Wall:
    """Static maze wall"""
    x: float
    y: float
    width: float
    height: float

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class Hazard:
    """Moving obstacle that drains energy on contact"""
    x: float
    y: float
    width: float
    height: float
    speed_x: float
    speed_y: float = 0.0  # unused, always 0
    direction: int = 1
    start_x: float = field(default=None, repr=False)  # type: ignore
    start_direction: int = field(default=None, repr=False)  # type: ignore

    def __post_init__(self):
        if self.start_x is None:
            self.start_x = self.x
        if self.start_direction is None:
            self.start_direction = self.direction

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def reset(self):
        self.x = self.start_x
        self.direction = self.start_direction


@dataclass
class Particle:
    """Confetti particle; life fades from 1.0 to 0"""
    x: float
    y: float
    vx: float
    vy: float
    color: Tuple[int, int, int]
    size: float
    life: float = 1.0
