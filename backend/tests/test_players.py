"""
Tests for the player implementations.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import (
    Player,
    RandomPlayer,
    GreedyPlayer,
    get_player_class,
    list_variants,
    AVAILABLE_VARIANTS,
)


def make_state(snake, food=(8, 8), width=9, height=9):
    return GameState(
        turn_number=0,
        snake_positions=snake,
        food=food,
        score=0,
        remaining_food=1,
        heading=LEFT,
        width=width,
        height=height,
    )


class TestPlayerBase:

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(4, 4), (4, 5)]))


class TestRandomPlayer:

    def test_avoids_walls_in_corner(self):
        """From the top-left corner only RIGHT is free once the body blocks DOWN."""
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(0, 0), (0, 1)])

        assert player.safe_moves(state) == [RIGHT]
        for _ in range(20):
            assert player.get_move(state) == RIGHT

    def test_avoids_own_tail(self):
        """The current tail is treated as an obstacle."""
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(3, 3), (2, 3), (2, 4), (3, 4)])

        assert DOWN not in player.safe_moves(state)
        assert set(player.safe_moves(state)) == {UP, RIGHT}

    def test_trapped_snake_still_returns_a_heading(self):
        player = RandomPlayer(rng=random.Random(0))
        state = make_state([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert player.safe_moves(state) == []
        assert player.get_move(state) in VALID_MOVES

    def test_seeded_players_agree(self):
        state = make_state([(4, 4), (4, 5)])
        a = RandomPlayer(rng=random.Random(9))
        b = RandomPlayer(rng=random.Random(9))
        assert [a.get_move(state) for _ in range(10)] == [b.get_move(state) for _ in range(10)]


class TestGreedyPlayer:

    @pytest.mark.parametrize("food,expected", [
        ((0, 4), LEFT),
        ((8, 4), RIGHT),
        ((4, 0), UP),
    ])
    def test_heads_for_food(self, food, expected):
        player = GreedyPlayer(rng=random.Random(0))
        assert player.get_move(make_state([(4, 4), (4, 5)], food=food)) == expected

    def test_food_behind_goes_around(self):
        """With the food straight behind, it turns instead of reversing."""
        player = GreedyPlayer(rng=random.Random(0))
        move = player.get_move(make_state([(4, 4), (4, 5)], food=(4, 8)))
        assert move in (LEFT, RIGHT, UP)

    def test_no_food_falls_back_to_random(self):
        player = GreedyPlayer(rng=random.Random(0))
        state = make_state([(4, 4), (4, 5)], food=None)
        assert player.get_move(state) in player.safe_moves(state)


class TestVariantRegistry:

    def test_known_variants(self):
        assert get_player_class("random") is RandomPlayer
        assert get_player_class("GREEDY") is GreedyPlayer
        assert get_player_class(None) is RandomPlayer
        assert list_variants() == AVAILABLE_VARIANTS == ["random", "greedy"]

    def test_unknown_variant_raises(self):
        with pytest.raises(ValueError):
            get_player_class("telepathic")
