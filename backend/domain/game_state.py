"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional

from .constants import (
    BORDER_CELL, BODY_CELL, FOOD_CELL, EMPTY_CELL, NEWLINE, PLAYING,
)


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        turn_number: how many turns have been accepted so far (0-based)
        snake_positions: list of (x, y), head first
        food: (x, y) of the food, or None once the last food has been eaten
        score: current score
        remaining_food: food still to be eaten for a win
        heading: last accepted heading
        status: 'playing', 'won' or 'lost'
        width, height: board dimensions
        death_reason: 'wall' or 'self' once lost, else None
    """

    def __init__(
        self,
        turn_number: int,
        snake_positions: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        remaining_food: int,
        heading: str,
        width: int,
        height: int,
        status: str = PLAYING,
        death_reason: Optional[str] = None
    ):
        self.turn_number = turn_number
        self.snake_positions = snake_positions
        self.food = food
        self.score = score
        self.remaining_food = remaining_food
        self.heading = heading
        self.width = width
        self.height = height
        self.status = status
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def cell_glyphs(self, x: int, y: int) -> str:
        """
        The two characters drawn for cell (x, y).

        Head and body share the same glyph; food is only drawn on a cell the
        snake does not cover.
        """
        cell = (x, y)
        if cell in self.snake_positions:
            return BODY_CELL
        if cell == self.food:
            return FOOD_CELL
        return EMPTY_CELL

    def print_board(self) -> str:
        """
        Returns the full bordered board, built row by row from scratch:
        ▒▒ = border
        ██ = snake (head and body)
        ●  = food
        Row 0 is the top of the board. Every row, border rows included,
        ends with a newline.
        """
        border_row = BORDER_CELL * (self.width + 2) + NEWLINE

        result = [border_row]
        for y in range(self.height):
            cells = "".join(self.cell_glyphs(x, y) for x in range(self.width))
            result.append(BORDER_CELL + cells + BORDER_CELL + NEWLINE)
        result.append(border_row)

        return "".join(result)

    def to_dict(self) -> dict:
        return {
            "turn_number": self.turn_number,
            "snake_positions": list(self.snake_positions),
            "food": self.food,
            "score": self.score,
            "remaining_food": self.remaining_food,
            "heading": self.heading,
            "width": self.width,
            "height": self.height,
            "status": self.status,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState turn={self.turn_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}, status={self.status}>"
        )
