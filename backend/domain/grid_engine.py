"""
GridEngine - the single-player, turn-based snake state machine.
"""

import logging
from typing import List, Optional, Tuple

from .board import in_bounds, place_food, step
from .constants import (
    VALID_MOVES, OPPOSITES, DEFAULT_HEADING,
    CONTINUE, WON, LOST, PLAYING, TERMINAL_STATES,
    DEATH_WALL, DEATH_SELF, DEATH_BOARD_FULL,
    MIN_BOARD_SIZE, MAX_BOARD_SIZE, MAX_FOOD_TARGET, MAX_SCORE,
)
from .errors import BoardFullError, ConfigError
from .game_state import GameState
from .random_source import RandomSource, SystemRandomSource
from .renderer import TextRenderer
from .snake import Snake

logger = logging.getLogger(__name__)


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}.")


class GridEngine:
    """
    Manages:
      - Board (width, height)
      - The snake
      - Food placement and consumption
      - Score and remaining food
      - Win/loss
      - The text rendering of the board

    Each call to move() is one turn. Wall and self collisions are reported
    through the outcome (CONTINUE, WON or LOST), not raised. The one raised
    game ending is BoardFullError, after the game is already marked LOST.
    """

    def __init__(
        self,
        width: int,
        height: int,
        food_target: int,
        initial_score: int = 0,
        rng: Optional[RandomSource] = None
    ):
        for name, value in (("width", width), ("height", height),
                            ("food_target", food_target), ("initial_score", initial_score)):
            _require_int(name, value)

        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ConfigError(
                f"Board {width}x{height} is too small; both sides must be at least {MIN_BOARD_SIZE}."
            )
        if width > MAX_BOARD_SIZE or height > MAX_BOARD_SIZE:
            raise ConfigError(
                f"Board {width}x{height} is too large; both sides must be at most {MAX_BOARD_SIZE}."
            )
        if food_target <= 0:
            raise ConfigError(f"food_target must be at least 1, got {food_target}.")
        if food_target > MAX_FOOD_TARGET:
            raise ConfigError(f"food_target must be at most {MAX_FOOD_TARGET}, got {food_target}.")
        if initial_score < 0:
            raise ConfigError(f"initial_score must not be negative, got {initial_score}.")
        if initial_score + food_target > MAX_SCORE:
            raise ConfigError(
                f"initial_score + food_target must not exceed {MAX_SCORE}, "
                f"got {initial_score} + {food_target}."
            )

        self.width = width
        self.height = height
        self.food_target = food_target
        self.rng = rng if rng is not None else SystemRandomSource()

        self._score = initial_score
        self._remaining_food = food_target
        self._heading = DEFAULT_HEADING
        self._status = PLAYING
        self.death_reason: Optional[str] = None
        self.turn_number = 0

        self._snake = Snake([
            (width // 2, height // 2),
            (width // 2, height // 2 + 1),
        ])
        self._food: Optional[Tuple[int, int]] = place_food(self._snake.positions, width, height, self.rng)

        # The skeleton is drawn once, up front
        self._renderer = TextRenderer(width, height)
        self._renderer.render(self.get_current_state(), is_first_call=True)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def score(self) -> int:
        return self._score

    @property
    def remaining_food(self) -> int:
        return self._remaining_food

    def get_score(self) -> int:
        return self._score

    def get_remaining_food(self) -> int:
        return self._remaining_food

    @property
    def heading(self) -> str:
        """The last accepted heading."""
        return self._heading

    @property
    def status(self) -> str:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status in TERMINAL_STATES

    @property
    def snake(self) -> List[Tuple[int, int]]:
        """Copy of the snake cells, head first."""
        return self._snake.cells()

    @property
    def food(self) -> Optional[Tuple[int, int]]:
        return self._food

    def set_food(self, cell: Tuple[int, int]):
        """
        Put the food on a specific cell.

        Raises:
            ValueError: if the cell is off the board or under the snake
        """
        cell = (cell[0], cell[1])
        if not in_bounds(cell, self.width, self.height):
            raise ValueError(f"Food out of bounds at {cell}.")
        if cell in self._snake:
            raise ValueError(f"Food cannot be placed on the snake at {cell}.")
        self._food = cell

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            turn_number=self.turn_number,
            snake_positions=self._snake.cells(),
            food=self._food,
            score=self._score,
            remaining_food=self._remaining_food,
            heading=self._heading,
            width=self.width,
            height=self.height,
            status=self._status,
            death_reason=self.death_reason
        )

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    def move(self, heading: str) -> str:
        """
        Execute one turn and return CONTINUE, WON or LOST.

          1) A request for the exact opposite of the last accepted heading
             is read as "keep going straight"; it is neither refused nor
             a loss.
          2) Leaving the board loses, with no state change.
          3) The head is moved, then checked against the body as it was
             before the turn (tail included). On a self collision the
             snapshot keeps the moved head and the unshifted body.
          4) The body ripples forward behind the head.
          5) Landing on food grows the snake into the vacated tail cell,
             scores, and either wins or places new food.

        Every turn that reaches an outcome counts in turn_number, the
        winning or losing one included.

        If the snake covers the whole board when new food is due, the game
        ends as LOST (death_reason 'board_full', no food) and BoardFullError
        is raised. Score, remaining food and growth from that turn are kept.

        Once the game is over, further calls change nothing and return the
        terminal outcome again.
        """
        if heading not in VALID_MOVES:
            raise ValueError(f"Invalid heading: {heading!r}. Expected one of {sorted(VALID_MOVES)}.")

        if self.is_over:
            logger.warning(f"move({heading}) called after the game ended ({self._status}); ignoring.")
            return self._status

        effective = self._heading if heading == OPPOSITES[self._heading] else heading

        new_head = step(self._snake.head, effective)
        if not in_bounds(new_head, self.width, self.height):
            return self._lose(DEATH_WALL, new_head)

        previous_head = self._snake.move_head(new_head)
        if self._snake.occurrences(new_head) > 1:
            return self._lose(DEATH_SELF, new_head)

        vacated = self._snake.follow(previous_head)

        if new_head == self._food:
            self._snake.grow(vacated)
            self._score += 1
            self._remaining_food -= 1
            logger.debug(
                f"Ate food at {new_head}: score={self._score}, remaining={self._remaining_food}, "
                f"length={len(self._snake)}"
            )

            if self._remaining_food == 0:
                self._food = None
                self._status = WON
                self.turn_number += 1
                logger.info(f"Game won on turn {self.turn_number} with score {self._score}.")
                return WON

            try:
                self._food = place_food(self._snake.positions, self.width, self.height, self.rng)
            except BoardFullError:
                # The eaten food is under the head; end the game before the error escapes
                self._food = None
                self._lose(DEATH_BOARD_FULL, new_head)
                raise
            logger.debug(f"New food at {self._food}")

        self._heading = effective
        self.turn_number += 1
        return CONTINUE

    def _lose(self, reason: str, cell: Tuple[int, int]) -> str:
        self._status = LOST
        self.death_reason = reason
        self.turn_number += 1
        logger.info(f"Game lost on turn {self.turn_number} ({reason} at {cell}) with score {self._score}.")
        return LOST

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, is_first_call: bool = False) -> str:
        """Render the current state through the engine's TextRenderer."""
        return self._renderer.render(self.get_current_state(), is_first_call=is_first_call)

    def __repr__(self):
        return (
            f"<GridEngine {self.width}x{self.height} turn={self.turn_number}, "
            f"score={self._score}, remaining_food={self._remaining_food}, status={self._status}>"
        )
