"""
Confetti particles emitted when the goal is reached
"""

from __future__ import annotations
import colorsys
import random
from typing import List, Tuple

from .entities import Particle

BURST_COUNT = 50
GRAVITY = 0.3
LIFE_DECAY = 0.02
# Repeated float subtraction can leave a residue just above zero
_LIFE_EPS = 1e-9


def hsl_color(hue: float, saturation: float = 0.7, lightness: float = 0.6) -> Tuple[int, int, int]:
    """HSL (hue in degrees) to an 8-bit RGB tuple"""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def emit_burst(
    particles: List[Particle],
    origin: Tuple[float, float],
    rng: random.Random,
    count: int = BURST_COUNT,
) -> List[Particle]:
    """Append `count` fresh particles at `origin` and return the list"""
    ox, oy = origin
    for _ in range(count):
        particles.append(Particle(
            x=ox,
            y=oy,
            vx=(rng.random() - 0.5) * 10,
            vy=(rng.random() - 0.5) * 10 - 5,  # biased upward
            color=hsl_color(rng.random() * 360),
            size=rng.random() * 5 + 2,
            life=1.0,
        ))
    return particles


def update_particles(particles: List[Particle]) -> List[Particle]:
    """Advance every particle one tick and drop the dead ones in place"""
    for p in particles:
        p.x += p.vx
        p.y += p.vy
        p.vy += GRAVITY
        p.life -= LIFE_DECAY

    particles[:] = [p for p in particles if p.life > _LIFE_EPS]
    return particles
