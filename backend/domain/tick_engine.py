"""
Tick engine - the per-tick transition rule.

step() is the only function that moves the snake. Every outcome is
expressed through the returned state: a collision sets `is_over` and
leaves the snake untouched, anything else commits the move in full.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import (
    DIRECTION_DELTAS,
    FOOD_SCORE,
    GRID_SIZE,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
)
from .direction_queue import DirectionQueue
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)


def random_free_cell(
    snake: Snake,
    rng: Optional[random.Random] = None,
    grid_size: int = GRID_SIZE
) -> Tuple[int, int]:
    """
    Return a random cell (x, y) not occupied by the snake.
    Simple rejection sampling; the board is small enough for this to be fine.
    """
    rng = rng or random
    while True:
        x = rng.randint(0, grid_size - 1)
        y = rng.randint(0, grid_size - 1)
        if (x, y) not in snake:
            return (x, y)


def initial_state(rng: Optional[random.Random] = None, grid_size: int = GRID_SIZE) -> GameState:
    """Fresh running game: fixed 3-segment snake heading UP, score 0, food on a free cell."""
    snake = Snake(list(INITIAL_SNAKE))
    return GameState(
        snake=snake,
        food=random_free_cell(snake, rng, grid_size),
        direction=INITIAL_DIRECTION,
        score=0,
        is_over=False,
        is_running=True,
        grid_size=grid_size
    )


def _end_game(state: GameState, reason: str) -> GameState:
    state.is_over = True
    state.death_reason = reason
    logger.info(f"Game over after {state.tick} ticks: {reason} collision, score {state.score}")
    return state


def step(state: GameState, queue: DirectionQueue, rng: Optional[random.Random] = None) -> GameState:
    """
    Advance the game by one tick.

      1) If the game is not running or already over, do nothing
      2) Commit at most one queued direction
      3) Compute the new head
      4) Wall check, then self check (the current tail is excluded)
      5) Move, growing and relocating the food if it was eaten

    The state is mutated in place and returned.
    """
    if not state.is_running or state.is_over:
        return state

    next_direction = queue.dequeue_next()
    if next_direction is not None:
        state.direction = next_direction

    hx, hy = state.snake.head
    dx, dy = DIRECTION_DELTAS[state.direction]
    new_head = (hx + dx, hy + dy)

    if not state.in_bounds(new_head):
        return _end_game(state, "wall")

    # The tail is treated as vacating even when food is eaten this tick.
    if state.snake.occupies(new_head, exclude_tail=True):
        return _end_game(state, "self")

    state.snake.positions.appendleft(new_head)

    if new_head == state.food:
        state.score += FOOD_SCORE
        state.food = random_free_cell(state.snake, rng, state.grid_size)
        logger.debug(f"Food eaten at {new_head}; score {state.score}, new food at {state.food}")
    else:
        state.snake.positions.pop()

    state.tick += 1
    return state
