"""Maze game module - One More Step grid-maze environment"""

from .entities import GameState
from .simulation import MazeGame
from .maze_env import MazeEnv, run_random_episode

__all__ = ['GameState', 'MazeGame', 'MazeEnv', 'run_random_episode']
