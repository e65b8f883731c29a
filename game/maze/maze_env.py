"""
MazeEnv - gymnasium wrapper around the One More Step maze
---------------------------------------------------------
- Same MazeGame simulation the arcade window plays
- Gymnasium API
- Discrete action space: stay, up, down, left, right
- One move (optional) then one simulation tick per step
- Vector observation: player state + goal offset + hazard offsets
- rgb_array rendering rasterises the frame with numpy, no display needed

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.maze.maze_env
"""

from __future__ import annotations

import random
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from . import layout
from .audio import Audio
from .entities import GameState
from .simulation import MazeGame
from .utils import Rect, clamp, seed_everything

# Action index -> direction name (0 is "stay")
ACTIONS = (None, "up", "down", "left", "right")

DEFAULT_REWARD = {
    "R_ENERGY": 0.01,   # per point of energy spent
    "R_WIN": 10.0,
    "R_LOSE": 5.0,
    "R_TIME": 0.001,
    "R_BLOCKED": 0.01,  # walking into a wall
}

# Raster colours (RGB)
BG_C = (15, 15, 30)
WALL_C = (42, 42, 78)
GOAL_C = (102, 255, 102)
HAZARD_C = (255, 50, 50)
PLAYER_C = (255, 179, 217)


class MazeEnv(gym.Env):
    """Maze navigation environment backed by MazeGame"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        start_energy: int = 100,
        hit_penalty: int = 10,
        reward_config: Optional[Dict[str, float]] = None,
        audio: Optional[Audio] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.width = layout.WIDTH
        self.height = layout.HEIGHT
        self.dt = dt
        self.max_steps = max_steps

        self.reward_config = dict(DEFAULT_REWARD)
        if reward_config:
            self.reward_config.update(
                {k: v for k, v in reward_config.items() if k.startswith("R_")}
            )

        self._step_count = 0
        self.game = MazeGame(
            audio=audio,
            rng=random.Random(),
            clock=self._sim_time,
            start_energy=start_energy,
            hit_penalty=hit_penalty,
        )

        self.action_space = spaces.Discrete(len(ACTIONS))

        # Player: pos(2) energy(1)
        # Goal: rel pos(2)
        # Each hazard: rel pos(2) direction(1)
        obs_dim = 2 + 1 + 2 + len(self.game.hazards) * 3
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None

    def _sim_time(self) -> float:
        return self._step_count * self.dt

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.game.rng.seed(seed)

        self._step_count = 0
        self.game.clear_events()
        self.game.start()

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        self.game.clear_events()

        direction = ACTIONS[int(action)]
        if direction is not None:
            self.game.move(direction)

        self._step_count += 1
        self.game.tick(self._sim_time())

        reward = self._compute_reward()

        terminated = self.game.state in (GameState.WON, GameState.LOST)
        truncated = (not terminated) and self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        p = self.game.player
        g = self.game.goal

        obs_parts = [
            (p.x / self.width) * 2 - 1,
            (p.y / self.height) * 2 - 1,
            (p.energy / max(1, self.game.start_energy)) * 2 - 1,
            clamp((g.x - p.x) / self.width, -1, 1),
            clamp((g.y - p.y) / self.height, -1, 1),
        ]
        for h in self.game.hazards:
            obs_parts += [
                clamp((h.x - p.x) / self.width, -1, 1),
                clamp((h.y - p.y) / self.height, -1, 1),
                float(h.direction),
            ]

        obs = np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)
        return obs

    def _compute_reward(self) -> float:
        rc = self.reward_config
        ev = self.game.events

        reward = 0.0
        reward -= rc["R_ENERGY"] * ev.get("energy_spent", 0.0)
        reward -= rc["R_BLOCKED"] * ev.get("blocked", 0.0)
        reward -= rc["R_TIME"]

        if ev.get("won", 0.0):
            reward += rc["R_WIN"]
        if ev.get("lost", 0.0):
            reward -= rc["R_LOSE"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "state": self.game.state.value,
            "energy": self.game.player.energy,
            "steps": self.game.player.steps,
            "elapsed": self.game.elapsed_time,
            "num_particles": len(self.game.particles),
            "events": dict(self.game.events),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb_array()

        if self._window is None:
            # Imported here so headless use never touches a display
            from .window import MazeWindow
            self._window = MazeWindow(self.game, drive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def _render_rgb_array(self) -> np.ndarray:
        """Rasterise the current frame into an (H, W, 3) uint8 array"""
        snap = self.game.snapshot()
        frame = np.empty((self.height, self.width, 3), dtype=np.uint8)
        frame[:, :] = BG_C

        for w in snap.walls:
            self._fill(frame, w.rect, WALL_C)
        self._fill(frame, snap.goal.rect, GOAL_C)
        for h in snap.hazards:
            self._fill(frame, h.rect, HAZARD_C)
        self._fill(frame, snap.player.rect, PLAYER_C)
        for p in snap.particles:
            self._fill(frame, Rect(p.x, p.y, p.size, p.size), p.color)
        return frame

    @staticmethod
    def _fill(frame: np.ndarray, rect: Rect, color: Tuple[int, int, int]):
        h, w = frame.shape[:2]
        x0 = int(clamp(rect.x, 0, w))
        y0 = int(clamp(rect.y, 0, h))
        x1 = int(clamp(rect.x + rect.width, 0, w))
        y1 = int(clamp(rect.y + rect.height, 0, h))
        if x1 > x0 and y1 > y0:
            frame[y0:y1, x0:x1] = color

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: Optional[int] = 42):
    """Run a random episode for testing"""
    env = MazeEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.3f}  "
          f"state={info['state']}  energy={info['energy']}  steps={info['steps']}")

    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=False)
