"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player returns the heading to request for the next turn given the
    current game state.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a heading given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
