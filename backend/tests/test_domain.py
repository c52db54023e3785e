"""
Tests for the domain entities: constants, Snake and GameState.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Snake,
    GameState,
    UP, DOWN, LEFT, RIGHT,
    VALID_MOVES,
    DIRECTION_DELTAS,
    OPPOSITE_DIRECTION,
    GRID_SIZE,
    INITIAL_SPEED,
    MIN_SPEED,
    opposite,
    parse_direction,
    tick_interval_ms,
)


class TestConstants:
    """Tests for direction tables and helpers."""

    def test_valid_moves(self):
        assert VALID_MOVES == {UP, DOWN, LEFT, RIGHT}

    def test_deltas_are_unit_steps(self):
        """Every direction moves exactly one cell; UP decreases y."""
        assert DIRECTION_DELTAS[UP] == (0, -1)
        assert DIRECTION_DELTAS[DOWN] == (0, 1)
        assert DIRECTION_DELTAS[LEFT] == (-1, 0)
        assert DIRECTION_DELTAS[RIGHT] == (1, 0)

    def test_each_direction_has_exactly_one_opposite(self):
        for direction in VALID_MOVES:
            other = opposite(direction)
            assert other != direction
            assert OPPOSITE_DIRECTION[other] == direction
            dx, dy = DIRECTION_DELTAS[direction]
            assert DIRECTION_DELTAS[other] == (-dx, -dy)

    def test_grid_size(self):
        assert GRID_SIZE == 20

    @pytest.mark.parametrize("raw,expected", [
        ("UP", UP),
        ("left", LEFT),
        ("  Right ", RIGHT),
        ("dOwN", DOWN),
    ])
    def test_parse_direction_normalizes(self, raw, expected):
        assert parse_direction(raw) == expected

    @pytest.mark.parametrize("raw", ["", "diagonal", "U P", None, 3])
    def test_parse_direction_rejects_unknown(self, raw):
        with pytest.raises(ValueError):
            parse_direction(raw)


class TestTickInterval:
    """Tests for the score-dependent scheduler interval."""

    @pytest.mark.parametrize("score,expected", [
        (0, 150),
        (20, 150),
        (30, 140),
        (50, 140),
        (90, 120),
        (300, 50),
        (1000, 50),
    ])
    def test_interval_steps_down_every_30_points(self, score, expected):
        assert tick_interval_ms(score) == expected

    def test_interval_bounds(self):
        assert tick_interval_ms(0) == INITIAL_SPEED
        assert tick_interval_ms(10_000) == MIN_SPEED


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization(self):
        positions = [(10, 10), (10, 11), (10, 12)]
        snake = Snake(positions)
        assert list(snake.positions) == positions
        assert len(snake) == 3

    def test_snake_requires_a_segment(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_snake_positions_is_deque(self):
        assert isinstance(Snake([(5, 5)]).positions, deque)

    def test_head_and_tail(self):
        snake = Snake([(5, 5), (5, 6), (5, 7)])
        assert snake.head == (5, 5)
        assert snake.tail == (5, 7)

    def test_single_segment_head_is_tail(self):
        snake = Snake([(1, 2)])
        assert snake.head == snake.tail == (1, 2)

    def test_occupies(self):
        snake = Snake([(5, 5), (5, 6), (5, 7)])
        assert snake.occupies((5, 6)) is True
        assert snake.occupies((5, 7)) is True
        assert snake.occupies((6, 6)) is False
        assert (5, 5) in snake

    def test_occupies_excluding_tail(self):
        """The tail cell does not count when exclude_tail is set."""
        snake = Snake([(5, 5), (5, 6), (5, 7)])
        assert snake.occupies((5, 7), exclude_tail=True) is False
        assert snake.occupies((5, 6), exclude_tail=True) is True

    def test_copy_is_independent(self):
        snake = Snake([(5, 5), (5, 6)])
        clone = snake.copy()
        clone.positions.appendleft((5, 4))
        assert list(snake.positions) == [(5, 5), (5, 6)]
        assert clone != snake


class TestGameState:
    """Tests for the GameState class."""

    def _state(self, **overrides):
        params = dict(
            snake=Snake([(10, 10), (10, 11), (10, 12)]),
            food=(3, 4),
            direction=UP,
            score=0,
            is_running=True
        )
        params.update(overrides)
        return GameState(**params)

    def test_defaults(self):
        state = GameState(snake=Snake([(1, 1)]), food=(2, 2))
        assert state.direction == UP
        assert state.score == 0
        assert state.is_over is False
        assert state.is_running is False
        assert state.tick == 0
        assert state.death_reason is None
        assert state.grid_size == GRID_SIZE

    def test_in_bounds(self):
        state = self._state()
        assert state.in_bounds((0, 0))
        assert state.in_bounds((19, 19))
        assert not state.in_bounds((-1, 0))
        assert not state.in_bounds((0, 20))
        assert not state.in_bounds((20, 5))

    def test_tick_interval_follows_score(self):
        assert self._state(score=60).tick_interval_ms == 130

    def test_copy_is_independent(self):
        state = self._state()
        snapshot = state.copy()
        state.snake.positions.appendleft((10, 9))
        state.score = 10
        state.is_over = True

        assert list(snapshot.snake) == [(10, 10), (10, 11), (10, 12)]
        assert snapshot.score == 0
        assert snapshot.is_over is False

    def test_to_dict(self):
        data = self._state(score=30, tick=4).to_dict()
        assert data["snake"] == [[10, 10], [10, 11], [10, 12]]
        assert data["food"] == [3, 4]
        assert data["direction"] == UP
        assert data["score"] == 30
        assert data["is_over"] is False
        assert data["is_running"] is True
        assert data["tick"] == 4
        assert data["death_reason"] is None
        assert data["grid_size"] == 20
        assert data["tick_interval_ms"] == 140

    def test_print_board(self):
        """print_board marks head, body and food on a 20x20 grid."""
        board_str = self._state().print_board()
        lines = board_str.split("\n")

        # 20 rows plus the x-axis labels
        assert len(lines) == GRID_SIZE + 1

        row_10 = lines[10].split()
        assert row_10[0] == "10"
        assert row_10[1 + 10] == "H"
        assert lines[11].split()[1 + 10] == "S"
        assert lines[12].split()[1 + 10] == "S"
        assert lines[4].split()[1 + 3] == "F"

        assert board_str.count("H") == 1
        assert board_str.count("S") == 2
        assert board_str.count("F") == 1

    def test_repr(self):
        repr_str = repr(self._state(score=20))
        assert "GameState" in repr_str
        assert "score=20" in repr_str
