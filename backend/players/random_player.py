"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.board import in_bounds, step
from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a heading that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def safe_moves(self, game_state: GameState) -> List[str]:
        head = game_state.head
        occupied = set(game_state.snake_positions)

        # The engine checks the new head against the body before it shifts,
        # so the current tail counts as an obstacle too.
        valid_moves: List[str] = []
        for move in (UP, DOWN, LEFT, RIGHT):
            target = step(head, move)
            if not in_bounds(target, game_state.width, game_state.height):
                continue
            if target in occupied:
                continue
            valid_moves.append(move)
        return valid_moves

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
