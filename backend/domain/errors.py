"""
Exceptions raised by the grid snake engine.
"""


class SnakeEngineError(Exception):
    """Base class for all engine errors."""


class ConfigError(SnakeEngineError, ValueError):
    """
    Raised when the engine (or the driver settings) are given invalid
    parameters. The engine is never constructed with clamped values.
    """


class BoardFullError(SnakeEngineError):
    """
    Raised when food must be placed but the snake covers every cell.

    Only reachable when the food target is at least ``width * height - 2``.
    """
