"""
Evaluation script for scripted policies on the maze environment
"""

import os
import csv
import argparse
import random
from typing import Callable, Dict, List, Optional

import numpy as np

from game.maze import MazeEnv
from game.maze.simulation import DIRECTIONS
from game.maze.maze_env import ACTIONS
from rl.configs.maze_config import ENV_CONFIG, EVAL_CONFIG, REWARD_CONFIGS


def random_policy(env: MazeEnv, rng: random.Random) -> int:
    """Uniform over the four moves"""
    return rng.randrange(1, len(ACTIONS))


def greedy_policy(env: MazeEnv, rng: random.Random) -> int:
    """
    Step along the axis with the larger distance to the goal, then the
    other axis, then any open direction.
    """
    game = env.game
    p, g = game.player, game.goal
    dx = (g.x + g.size / 2) - (p.x + p.size / 2)
    dy = (g.y + g.size / 2) - (p.y + p.size / 2)

    horizontal = "right" if dx > 0 else "left"
    vertical = "down" if dy > 0 else "up"
    preferred = [horizontal, vertical] if abs(dx) >= abs(dy) else [vertical, horizontal]

    def is_open(name):
        mx, my = DIRECTIONS[name]
        return not game.blocked(p.x + mx * p.speed, p.y + my * p.speed)

    for name in preferred:
        if is_open(name):
            return ACTIONS.index(name)

    fallback = [name for name in DIRECTIONS if is_open(name)]
    if not fallback:
        return 0
    return ACTIONS.index(rng.choice(fallback))


POLICIES: Dict[str, Callable[[MazeEnv, random.Random], int]] = {
    "random": random_policy,
    "greedy": greedy_policy,
}


def run_episodes(
    policy: str = "greedy",
    n_episodes: int = 10,
    seed: Optional[int] = None,
    move_every: int = 6,
    env_config: Optional[dict] = None,
    reward_config: Optional[dict] = None,
    render: bool = False,
    verbose: bool = True,
) -> List[Dict[str, float]]:
    """
    Run a scripted policy for several episodes

    Args:
        policy: Name of the policy ('random' or 'greedy')
        n_episodes: Number of episodes to run
        seed: Base seed; episode i uses seed + i
        move_every: Only act every N ticks (stay otherwise)
        env_config: MazeEnv keyword arguments (default: ENV_CONFIG)
        reward_config: Reward term overrides
        render: Open the arcade window while running
        verbose: Print a line per episode
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]
    rng = random.Random(seed)

    config = dict(ENV_CONFIG if env_config is None else env_config)
    env = MazeEnv(
        render_mode="human" if render else None,
        reward_config=reward_config,
        **config,
    )

    episodes = []
    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        length = 0

        while not (terminated or truncated):
            if move_every <= 1 or length % move_every == 0:
                action = act(env, rng)
            else:
                action = 0
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            length += 1

        result = {
            "episode": episode,
            "reward": total_reward,
            "length": length,
            "won": float(info["state"] == "won"),
            "energy": info["energy"],
            "steps": info["steps"],
        }
        episodes.append(result)

        if verbose:
            print(f"Episode {episode + 1}/{n_episodes}: "
                  f"Reward = {total_reward:.2f}, Length = {length}, "
                  f"State = {info['state']}, Energy = {info['energy']}")

    env.close()
    return episodes


def summarize(episodes: List[Dict[str, float]]) -> Dict[str, float]:
    rewards = np.array([e["reward"] for e in episodes], dtype=np.float64)
    lengths = np.array([e["length"] for e in episodes], dtype=np.float64)
    wins = np.array([e["won"] for e in episodes], dtype=np.float64)
    return {
        "mean_reward": float(np.mean(rewards)),
        "std_reward": float(np.std(rewards)),
        "mean_length": float(np.mean(lengths)),
        "win_rate": float(np.mean(wins)),
    }


def write_csv(episodes: List[Dict[str, float]], log_dir: str, name: str) -> str:
    """Save per-episode results to <log_dir>/<name>_episodes.csv"""
    os.makedirs(log_dir, exist_ok=True)
    csv_path = os.path.join(log_dir, f"{name}_episodes.csv")
    fields = ["episode", "reward", "length", "won", "energy", "steps"]
    with open(csv_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(fields)
        for e in episodes:
            writer.writerow([e[k] for k in fields])
    return csv_path


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(description="Evaluate scripted policies on the maze")
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=sorted(POLICIES),
        help="Policy to run (default: greedy)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help=f"Number of episodes (default: {EVAL_CONFIG['n_episodes']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help=f"Random seed (default: {EVAL_CONFIG['seed']})",
    )
    parser.add_argument(
        "--move-every",
        type=int,
        default=EVAL_CONFIG["move_every"],
        help="Act only every N ticks",
    )
    parser.add_argument(
        "--reward",
        type=str,
        default="baseline",
        choices=sorted(REWARD_CONFIGS),
        help="Reward shaping config (default: baseline)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Watch the episodes in an arcade window",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help=f"Write per-episode results under {EVAL_CONFIG['log_dir']}",
    )

    args = parser.parse_args(argv)

    episodes = run_episodes(
        policy=args.policy,
        n_episodes=args.n_episodes,
        seed=args.seed,
        move_every=args.move_every,
        reward_config=REWARD_CONFIGS[args.reward],
        render=args.render,
    )
    summary = summarize(episodes)

    print("\n" + "="*50)
    print(f"Evaluation Results ({args.policy}, {args.n_episodes} episodes):")
    print(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
    print(f"Mean Episode Length: {summary['mean_length']:.1f}")
    print(f"Win Rate: {summary['win_rate']:.0%}")
    print("="*50)

    if args.csv:
        path = write_csv(episodes, EVAL_CONFIG["log_dir"], args.policy)
        print(f"[evaluate] Wrote {path}")

    return summary


if __name__ == "__main__":
    main()
