"""
Domain entities for the snake simulation core.

This module contains the game entities and rules that are independent of
infrastructure concerns (HTTP, storage, scheduling, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DIRECTION_DELTAS, OPPOSITE_DIRECTION,
    GRID_SIZE, INITIAL_SNAKE, INITIAL_DIRECTION, FOOD_SCORE,
    INITIAL_SPEED, MIN_SPEED,
    opposite, parse_direction, tick_interval_ms,
)
from .snake import Snake
from .game_state import GameState
from .direction_queue import DirectionQueue
from .tick_engine import initial_state, random_free_cell, step

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DIRECTION_DELTAS', 'OPPOSITE_DIRECTION',
    'GRID_SIZE', 'INITIAL_SNAKE', 'INITIAL_DIRECTION', 'FOOD_SCORE',
    'INITIAL_SPEED', 'MIN_SPEED',
    'opposite', 'parse_direction', 'tick_interval_ms',
    'Snake',
    'GameState',
    'DirectionQueue',
    'initial_state', 'random_free_cell', 'step',
]
