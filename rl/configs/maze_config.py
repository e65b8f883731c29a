"""
Configuration for the maze environment and evaluation runs
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # set to "human" to watch episodes
    "dt": 1/60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "start_energy": 100,
    "hit_penalty": 10,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Small per-energy cost, big terminal bonus / penalty",
    "R_ENERGY": 0.01,    # Penalty per point of energy spent
    "R_WIN": 10.0,       # Reaching the goal
    "R_LOSE": 5.0,       # Running out of energy
    "R_TIME": 0.001,     # Small time penalty
    "R_BLOCKED": 0.01,   # Walking into a wall
}

REWARD_CONFIG_CAUTIOUS = {
    "name": "cautious",
    "description": "Hazard contact hurts a lot more than walking",
    "R_ENERGY": 0.05,
    "R_WIN": 10.0,
    "R_LOSE": 10.0,
    "R_TIME": 0.0005,
    "R_BLOCKED": 0.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "cautious": REWARD_CONFIG_CAUTIOUS,
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
    # Ticks to wait between moves; 0 moves every tick
    "move_every": 6,
    "log_dir": "./logs",
}
