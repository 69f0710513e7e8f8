"""
Domain entities for the grid snake engine.

This module contains the engine, its entities and the text renderer. They are
independent of process-level concerns (settings, logging setup, CLI).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES, DEFAULT_HEADING,
    CONTINUE, WON, LOST, PLAYING,
)
from .errors import SnakeEngineError, ConfigError, BoardFullError
from .random_source import RandomSource, SystemRandomSource
from .snake import Snake
from .game_state import GameState
from .renderer import TextRenderer
from .grid_engine import GridEngine

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES', 'DEFAULT_HEADING',
    'CONTINUE', 'WON', 'LOST', 'PLAYING',
    'SnakeEngineError', 'ConfigError', 'BoardFullError',
    'RandomSource', 'SystemRandomSource',
    'Snake',
    'GameState',
    'TextRenderer',
    'GridEngine',
]
