"""
Tests for the Snake and GameState entities.
"""

import os
import sys
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Snake, GameState, LEFT, PLAYING


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization(self):
        """Snake keeps its cells in order, head first."""
        positions = [(5, 5), (4, 5), (3, 5)]
        snake = Snake(positions)
        assert list(snake.positions) == positions
        assert len(snake) == 3

    def test_snake_needs_two_cells(self):
        with pytest.raises(ValueError):
            Snake([(5, 5)])

    def test_snake_head_and_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5), (5, 6)])
        assert isinstance(snake.positions, deque)

    def test_move_head_leaves_body(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        previous = snake.move_head((6, 5))
        assert previous == (5, 5)
        assert snake.cells() == [(6, 5), (4, 5), (3, 5)]

    def test_follow_ripples_body(self):
        """Each segment takes its predecessor's old cell; the old tail is returned."""
        snake = Snake([(5, 5), (4, 5), (3, 5), (3, 6)])
        previous = snake.move_head((5, 4))

        vacated = snake.follow(previous)

        assert snake.cells() == [(5, 4), (5, 5), (4, 5), (3, 5)]
        assert vacated == (3, 6)

    def test_grow_appends_tail(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.grow((3, 5))
        assert snake.tail == (3, 5)
        assert len(snake) == 3

    def test_occurrences_and_contains(self):
        snake = Snake([(2, 2), (1, 2), (2, 2)])
        assert snake.occurrences((2, 2)) == 2
        assert (1, 2) in snake
        assert (0, 0) not in snake

    def test_cells_is_a_copy(self):
        snake = Snake([(5, 5), (4, 5)])
        cells = snake.cells()
        cells.append((0, 0))
        assert len(snake) == 2


def make_state(**overrides):
    params = dict(
        turn_number=0,
        snake_positions=[(4, 4), (4, 5)],
        food=(1, 2),
        score=0,
        remaining_food=3,
        heading=LEFT,
        width=9,
        height=9,
    )
    params.update(overrides)
    return GameState(**params)


class TestGameState:
    """Tests for the GameState class."""

    def test_gamestate_initialization(self):
        state = make_state(score=4)
        assert state.snake_positions == [(4, 4), (4, 5)]
        assert state.head == (4, 4)
        assert state.food == (1, 2)
        assert state.score == 4
        assert state.status == PLAYING
        assert state.death_reason is None

    def test_print_board_shape(self):
        """Every row is (width + 2) cells of two characters plus a newline."""
        board = make_state(width=12, height=9).print_board()
        rows = board.split("\n")

        assert board.endswith("\n")
        assert rows[-1] == ""
        assert len(rows[:-1]) == 11
        assert all(len(row) == 28 for row in rows[:-1])
        assert rows[0] == "▒" * 28
        assert rows[-2] == "▒" * 28

    def test_print_board_glyphs(self):
        """Snake cells are solid blocks, food is a dot followed by a blank."""
        rows = make_state().print_board().split("\n")

        # interior cell (x, y) sits on row y + 1, columns 2 * (x + 1)
        assert rows[5][10:12] == "██"
        assert rows[6][10:12] == "██"
        assert rows[3][4:6] == "● "
        assert rows[1][2:4] == "  "
        assert rows[1][:2] == "▒▒"
        assert rows[1][-2:] == "▒▒"

    def test_print_board_without_food(self):
        board = make_state(food=None).print_board()
        assert "●" not in board
        assert board.count("█") == 4

    def test_to_dict(self):
        data = make_state().to_dict()
        assert data["snake_positions"] == [(4, 4), (4, 5)]
        assert data["remaining_food"] == 3
        assert data["heading"] == LEFT
        assert data["width"] == 9

    def test_repr(self):
        assert "score=0" in repr(make_state())
