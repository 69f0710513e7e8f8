"""
Greedy player - heads for the food along the shortest Manhattan route.
"""

from domain.board import step
from domain.game_state import GameState
from .random_player import RandomPlayer


class GreedyPlayer(RandomPlayer):
    """
    Among the safe headings, picks the one that brings the head closest to
    the food. Ties are broken randomly; with no food on the board it
    behaves like RandomPlayer.
    """

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)
        if game_state.food is None or not valid_moves:
            return super().get_move(game_state)

        fx, fy = game_state.food

        def distance(move: str) -> int:
            x, y = step(game_state.head, move)
            return abs(fx - x) + abs(fy - y)

        best = min(distance(move) for move in valid_moves)
        return self.rng.choice([move for move in valid_moves if distance(move) == best])
