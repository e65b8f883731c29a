"""
MazeGame - simulation context for "One More Step"
-------------------------------------------------
- Grid movement gated by strict AABB wall collision
- Hazards bounce back and forth between fixed margins
- Energy: -1 per move, -10 per tick of hazard contact, floor 0
- Explicit state machine: TITLE -> PLAYING -> WON | LOST
- Confetti burst on win, screen shake on hit

No rendering or input handling happens here. The window and the
gymnasium env both drive the same object: input calls attempt_move()
and the frame callback calls tick().
"""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple

from . import layout
from .audio import Audio
from .entities import GameState, Goal, Hazard, Particle, Player, Wall
from .particles import emit_burst, update_particles, BURST_COUNT
from .utils import format_time, goal_reached, intersects

# Cardinal moves only
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

SHAKE_DECAY = 0.9
SHAKE_FLOOR = 0.1

_ANY = frozenset(GameState)

# trigger -> (states it is accepted in, target state)
TRANSITIONS: Dict[str, Tuple[frozenset, GameState]] = {
    "start": (_ANY, GameState.PLAYING),
    "restart": (frozenset({GameState.PLAYING, GameState.WON, GameState.LOST}), GameState.PLAYING),
    "title": (_ANY, GameState.TITLE),
    "win": (frozenset({GameState.PLAYING}), GameState.WON),
    "lose": (frozenset({GameState.PLAYING}), GameState.LOST),
}


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only copy of everything the renderer needs for one frame"""
    state: GameState
    walls: Tuple[Wall, ...]
    hazards: Tuple[Hazard, ...]
    player: Player
    goal: Goal
    particles: Tuple[Particle, ...]
    shake: float
    hud: Dict[str, object]


class MazeGame:
    """Owns all mutable game state; one instance per window or env"""

    def __init__(
        self,
        audio: Optional[Audio] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        start_energy: int = 100,
        move_cost: int = 1,
        hit_penalty: int = 10,
        shake_on_hit: float = 10.0,
        burst_count: int = BURST_COUNT,
    ):
        self.audio = audio if audio is not None else Audio()
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.monotonic

        # Gameplay config
        self.start_energy = start_energy
        self.move_cost = move_cost
        self.hit_penalty = hit_penalty
        self.shake_on_hit = shake_on_hit
        self.burst_count = burst_count

        # World state
        self.state = GameState.TITLE
        self.walls: Tuple[Wall, ...] = layout.WALLS
        self.goal: Goal = layout.make_goal()
        self.player: Player = self._spawn_player()
        self.hazards: List[Hazard] = layout.make_hazards()
        self.particles: List[Particle] = []
        self.shake = 0.0

        # Timer
        self.start_time = 0.0
        self.elapsed_time = 0

        # Event counters, cleared by the caller
        self.events: Dict[str, float] = {}
        self.clear_events()

    # ----------------------------
    # State machine
    # ----------------------------

    def _transition(self, trigger: str) -> bool:
        allowed, target = TRANSITIONS[trigger]
        if self.state not in allowed:
            return False
        self.state = target
        return True

    def start(self):
        """Play / play again / retry: fresh round from any screen"""
        self.reset()
        self._transition("start")

    def restart(self):
        """Restart key; does nothing on the title screen"""
        if self.state not in TRANSITIONS["restart"][0]:
            return False
        self.reset()
        return self._transition("restart")

    def go_to_title(self):
        self._transition("title")

    def reset(self):
        """Put every mutable entity back to its starting value"""
        self.player = self._spawn_player()
        for h in self.hazards:
            h.reset()
        self.particles = []
        self.shake = 0.0
        self.start_time = self.clock()
        self.elapsed_time = 0

    def _spawn_player(self) -> Player:
        x, y = layout.SPAWN
        return Player(x=x, y=y, energy=self.start_energy)

    # _win / _lose only change state; callers play sounds afterwards

    def _win(self) -> bool:
        if not self._transition("win"):
            return False
        self.events["won"] = 1.0
        emit_burst(self.particles, layout.BURST_ORIGIN, self.rng, self.burst_count)
        return True

    def _lose(self) -> bool:
        self.player.energy = max(0, self.player.energy)
        if not self._transition("lose"):
            return False
        self.events["lost"] = 1.0
        return True

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def blocked(self, x: float, y: float) -> bool:
        """True if a player box at (x, y) would overlap any wall"""
        candidate = replace(self.player, x=x, y=y).rect
        return any(intersects(candidate, w.rect) for w in self.walls)

    def attempt_move(self, dx: int, dy: int) -> bool:
        """
        Move one grid step in a cardinal direction.

        Returns True if the player moved. A move into a wall changes
        nothing and costs nothing.
        """
        if (dx, dy) not in DIRECTIONS.values():
            raise ValueError(f"Not a cardinal direction: ({dx}, {dy})")
        if self.state is not GameState.PLAYING:
            return False

        p = self.player
        new_x = p.x + dx * p.speed
        new_y = p.y + dy * p.speed
        if self.blocked(new_x, new_y):
            self.events["blocked"] += 1.0
            return False

        p.x = new_x
        p.y = new_y
        p.steps += 1
        p.energy -= self.move_cost
        self.events["moves"] += 1.0
        self.events["energy_spent"] += self.move_cost

        # Reaching the goal beats running out on the same move
        won = lost = False
        if goal_reached(p, self.goal):
            won = self._win()
        elif p.energy <= 0:
            lost = self._lose()

        self.audio.play_move()
        if won:
            self.audio.play_win()
        elif lost:
            self.audio.play_lose()
        return True

    def move(self, direction: str) -> bool:
        dx, dy = DIRECTIONS[direction]
        return self.attempt_move(dx, dy)

    def update_hazards(self):
        for h in self.hazards:
            h.x += h.speed_x * h.direction

            # Flip for the next tick, no clamping
            if h.x < layout.HAZARD_LEFT_MARGIN or h.x + h.width > layout.HAZARD_RIGHT_MARGIN:
                h.direction *= -1

    def touching_hazard(self) -> bool:
        player_rect = self.player.rect
        return any(intersects(player_rect, h.rect) for h in self.hazards)

    def _handle_hazard_contact(self):
        # Applied every tick of overlap, not just on entry
        if not self.touching_hazard():
            return
        self.player.energy -= self.hit_penalty
        self.shake = self.shake_on_hit
        self.events["hits"] += 1.0
        self.events["energy_spent"] += self.hit_penalty

        lost = False
        if self.player.energy <= 0:
            self.player.energy = 0
            lost = self._lose()

        self.audio.play_hit()
        if lost:
            self.audio.play_lose()

    def _update_timer(self, now: float):
        self.elapsed_time = max(0, int(math.floor(now - self.start_time)))

    def decay_shake(self):
        if self.shake > 0:
            self.shake *= SHAKE_DECAY
            if self.shake < SHAKE_FLOOR:
                self.shake = 0.0

    def tick(self, now: Optional[float] = None):
        """Advance one frame"""
        if now is None:
            now = self.clock()

        self.decay_shake()

        if self.state is GameState.PLAYING:
            self.update_hazards()
            self._update_timer(now)
            update_particles(self.particles)
            self._handle_hazard_contact()
        elif self.state is GameState.WON:
            update_particles(self.particles)

    # ----------------------------
    # Read-side helpers
    # ----------------------------

    def clear_events(self):
        self.events = {"moves": 0.0, "blocked": 0.0, "hits": 0.0,
                       "energy_spent": 0.0, "won": 0.0, "lost": 0.0}

    def hud(self) -> Dict[str, object]:
        return {
            "energy": self.player.energy,
            "steps": self.player.steps,
            "time": format_time(self.elapsed_time),
        }

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            state=self.state,
            walls=self.walls,
            hazards=tuple(replace(h) for h in self.hazards),
            player=replace(self.player),
            goal=replace(self.goal),
            particles=tuple(replace(p) for p in self.particles),
            shake=self.shake,
            hud=self.hud(),
        )
