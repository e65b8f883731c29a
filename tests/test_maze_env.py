"""Tests for the gymnasium wrapper."""

import numpy as np
import pytest

from game.maze.maze_env import ACTIONS, MazeEnv, PLAYER_C, WALL_C


@pytest.fixture
def env():
    e = MazeEnv()
    yield e
    e.close()


class TestMazeEnvApi:

    def test_reset(self, env):
        obs, info = env.reset(seed=0)
        assert env.observation_space.contains(obs)
        assert obs.shape == (14,)
        assert info["state"] == "playing"
        assert info["energy"] == 100

    def test_action_space(self, env):
        assert env.action_space.n == len(ACTIONS) == 5

    def test_stay_costs_only_time(self, env):
        env.reset(seed=0)
        obs, reward, terminated, truncated, info = env.step(0)
        assert reward == pytest.approx(-env.reward_config["R_TIME"])
        assert not terminated
        assert not truncated
        assert info["steps"] == 0

    def test_move_right(self, env):
        env.reset(seed=0)
        _, reward, _, _, info = env.step(ACTIONS.index("right"))
        assert info["steps"] == 1
        assert info["energy"] == 99
        assert info["events"]["moves"] == 1.0
        assert reward == pytest.approx(-0.01 - 0.001)

    def test_blocked_move_penalised(self, env):
        env.reset(seed=0)
        _, reward, _, _, info = env.step(ACTIONS.index("down"))
        assert info["events"]["blocked"] == 1.0
        assert info["energy"] == 100
        assert reward == pytest.approx(-0.01 - 0.001)

    def test_loss_terminates(self):
        env = MazeEnv(start_energy=1)
        env.reset(seed=0)
        _, reward, terminated, truncated, info = env.step(ACTIONS.index("right"))
        assert terminated
        assert not truncated
        assert info["state"] == "lost"
        assert reward < -env.reward_config["R_LOSE"] + 0.1

    def test_truncation(self):
        env = MazeEnv(max_steps=5)
        env.reset(seed=0)
        for _ in range(4):
            _, _, terminated, truncated, _ = env.step(0)
            assert not truncated
        _, _, terminated, truncated, _ = env.step(0)
        assert truncated
        assert not terminated

    def test_timer_uses_simulated_clock(self):
        env = MazeEnv(dt=0.5)
        env.reset(seed=0)
        for _ in range(5):
            _, _, _, _, info = env.step(0)
        assert info["elapsed"] == 2

    def test_reward_config_override(self):
        env = MazeEnv(reward_config={"name": "x", "R_TIME": 0.5})
        assert env.reward_config["R_TIME"] == 0.5
        assert "name" not in env.reward_config

    def test_unsupported_render_mode(self):
        with pytest.raises(AssertionError):
            MazeEnv(render_mode="ascii")


class TestRgbArray:

    def test_frame_shape_and_colours(self):
        env = MazeEnv(render_mode="rgb_array")
        env.reset(seed=0)
        frame = env.render()

        assert frame.shape == (600, 800, 3)
        assert frame.dtype == np.uint8
        assert tuple(frame[5, 5]) == WALL_C
        assert tuple(frame[565, 65]) == PLAYER_C

    def test_render_none_mode(self, env):
        env.reset(seed=0)
        assert env.render() is None
