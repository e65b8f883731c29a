"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import NamedTuple, Optional, Tuple
import numpy as np


class Rect(NamedTuple):
    """Axis-aligned rectangle, top-left origin, y grows downward"""
    x: float
    y: float
    width: float
    height: float


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def intersects(a: Rect, b: Rect) -> bool:
    """Strict AABB overlap test. Touching edges do not count."""
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


def center_distance(a: Rect, b: Rect) -> float:
    """Euclidean distance between the centres of two rectangles"""
    return math.hypot(
        (a.x + a.width / 2) - (b.x + b.width / 2),
        (a.y + a.height / 2) - (b.y + b.height / 2),
    )


def goal_reached(player, goal) -> bool:
    """Circular proximity check between the player and the goal tile"""
    dist = center_distance(player.rect, goal.rect)
    return dist < (player.size / 2 + goal.size / 2)


def shake_offset(amount: float, rng: random.Random) -> Tuple[float, float]:
    """Random scene jitter in [-amount/2, amount/2) on both axes"""
    if amount <= 0:
        return 0.0, 0.0
    return (rng.random() * amount - amount / 2,
            rng.random() * amount - amount / 2)


def format_time(seconds: int) -> str:
    """Format elapsed seconds as m:ss"""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
