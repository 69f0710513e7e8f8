"""
Text renderer for the grid snake engine.

The board is drawn into a flat character buffer, two characters per cell,
surrounded by a border and with a newline closing every row (border rows
included). The border and newlines are written once by initial_layout();
afterwards update_interior() only rewrites the interior cells, addressing
them through fixed strides instead of rebuilding the whole string.

Layout for a width x height board:

    row stride   = (width + 2) * CELL_WIDTH + 1
    cell (x, y)  = (y + 1) * row stride + (x + 1) * CELL_WIDTH
    buffer size  = (height + 2) * row stride
"""

import logging
from typing import List, Optional

from .constants import (
    CELL_WIDTH, BORDER_CELL, BODY_CELL, FOOD_CELL, EMPTY_CELL, NEWLINE,
)
from .game_state import GameState

logger = logging.getLogger(__name__)


class TextRenderer:
    """Owns the character buffer for one board and keeps it up to date."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

        self.row_stride = (width + 2) * CELL_WIDTH + len(NEWLINE)
        self.interior_origin = self.row_stride + CELL_WIDTH
        self.length = (height + 2) * self.row_stride

        self._buffer: Optional[List[str]] = None

    @property
    def is_laid_out(self) -> bool:
        return self._buffer is not None

    def cell_offset(self, x: int, y: int) -> int:
        """Index of the first character of interior cell (x, y)."""
        return self.interior_origin + y * self.row_stride + x * CELL_WIDTH

    def initial_layout(self) -> None:
        """Allocate the buffer and draw the border with a blank interior."""
        border_row = list(BORDER_CELL * (self.width + 2) + NEWLINE)
        interior_row = list(BORDER_CELL + EMPTY_CELL * self.width + BORDER_CELL + NEWLINE)

        buffer = list(border_row)
        for _ in range(self.height):
            buffer.extend(interior_row)
        buffer.extend(border_row)

        self._buffer = buffer
        logger.debug(f"Laid out {self.width}x{self.height} board ({self.length} chars)")

    def update_interior(self, state: GameState) -> None:
        """Rewrite every interior cell from ``state``; border and newlines stay as they are."""
        if not self.is_laid_out:
            self.initial_layout()
        self._check_dimensions(state)

        buffer = self._buffer
        snake = set(state.snake_positions)
        food = state.food

        for y in range(self.height):
            k = self.interior_origin + y * self.row_stride
            for x in range(self.width):
                cell = (x, y)
                if cell in snake:
                    glyphs = BODY_CELL
                elif cell == food:
                    glyphs = FOOD_CELL
                else:
                    glyphs = EMPTY_CELL
                buffer[k] = glyphs[0]
                buffer[k + 1] = glyphs[1]
                k += CELL_WIDTH

    def render(self, state: GameState, is_first_call: bool = False) -> str:
        """
        Render ``state`` and return the board text.

        The first call only lays out the skeleton (border and blank interior).
        Later calls refresh the interior in place. The returned string is a
        copy; the buffer itself is never handed out.
        """
        if is_first_call:
            self.initial_layout()
        else:
            self.update_interior(state)
        return "".join(self._buffer)

    def _check_dimensions(self, state: GameState) -> None:
        if (state.width, state.height) != (self.width, self.height):
            raise ValueError(
                f"Renderer is sized {self.width}x{self.height}, "
                f"state is {state.width}x{state.height}."
            )
