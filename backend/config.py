"""
Settings for driving a game, read from the environment.

Values come from environment variables, optionally loaded from a .env file:
- SNAKE_WIDTH / SNAKE_HEIGHT: board size (default 20x20)
- SNAKE_FOOD_TARGET: food to eat for a win (default 10)
- SNAKE_INITIAL_SCORE: starting score (default 0)
- SNAKE_SEED: seed for reproducible games (default: unseeded)
- SNAKE_PLAYER: player variant driving the snake (default 'random')
- SNAKE_MAX_TURNS: turn cap for automated runs (default 1000)
- SNAKE_TURN_DELAY: seconds to wait between turns (default 0)
- LOG_LEVEL: logging level (default WARNING)
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.errors import ConfigError

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_FOOD_TARGET = 10
DEFAULT_MAX_TURNS = 1000
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class GameSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    food_target: int = DEFAULT_FOOD_TARGET
    initial_score: int = 0
    seed: Optional[int] = None
    player: str = "random"
    max_turns: int = DEFAULT_MAX_TURNS
    turn_delay: float = 0.0
    log_level: str = DEFAULT_LOG_LEVEL


def _get_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _get_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> GameSettings:
    """
    Build GameSettings from environment variables.

    Args:
        env: mapping to read from (defaults to os.environ)
        dotenv: load a .env file into os.environ first

    Raises:
        ConfigError: if a variable is malformed
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    log_level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

    max_turns = _get_int(env, "SNAKE_MAX_TURNS", DEFAULT_MAX_TURNS)
    if max_turns <= 0:
        raise ConfigError(f"SNAKE_MAX_TURNS must be positive, got {max_turns}")

    return GameSettings(
        width=_get_int(env, "SNAKE_WIDTH", DEFAULT_WIDTH),
        height=_get_int(env, "SNAKE_HEIGHT", DEFAULT_HEIGHT),
        food_target=_get_int(env, "SNAKE_FOOD_TARGET", DEFAULT_FOOD_TARGET),
        initial_score=_get_int(env, "SNAKE_INITIAL_SCORE", 0),
        seed=_get_int(env, "SNAKE_SEED", None),
        player=(env.get("SNAKE_PLAYER") or "random").strip().lower(),
        max_turns=max_turns,
        turn_delay=_get_float(env, "SNAKE_TURN_DELAY", 0.0),
        log_level=log_level,
    )
