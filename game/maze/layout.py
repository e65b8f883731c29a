"""
The fixed maze: playfield size, walls, hazard rows, spawn and goal.

Coordinates are in pixels with the origin at the top-left corner.
"""

from typing import List, Tuple

from .entities import Goal, Hazard, Wall

WIDTH = 800
HEIGHT = 600

# Hazards flip direction once they pass these x bounds
HAZARD_LEFT_MARGIN = 30
HAZARD_RIGHT_MARGIN = WIDTH - 30

SPAWN = (50.0, 550.0)
GOAL_POS = (750.0, 50.0)

# Confetti burst origin
BURST_ORIGIN = (WIDTH / 2, HEIGHT / 2)

WALLS: Tuple[Wall, ...] = (
    # Border
    Wall(0, 0, 800, 20),
    Wall(0, 580, 800, 20),
    Wall(0, 0, 20, 600),
    Wall(780, 0, 20, 600),
    # Internal
    Wall(200, 100, 20, 300),
    Wall(400, 200, 20, 380),
    Wall(600, 20, 20, 400),
)

# (x, y, width, height, speed_x, direction)
HAZARD_ROWS = (
    (100, 200, 100, 20, 2.0, 1),
    (300, 400, 120, 20, 1.5, -1),
    (500, 300, 80, 20, 3.0, 1),
)


def make_hazards() -> List[Hazard]:
    """Fresh hazards at their initial positions"""
    return [
        Hazard(x=x, y=y, width=w, height=h, speed_x=sx, direction=d)
        for x, y, w, h, sx, d in HAZARD_ROWS
    ]


def make_goal() -> Goal:
    return Goal(x=GOAL_POS[0], y=GOAL_POS[1])
