"""
Game constants for the snake simulation core.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit deltas per direction. Row 0 is the top of the board, so UP => y - 1.
DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTION: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Board settings
GRID_SIZE = 20
INITIAL_SNAKE = [(10, 10), (10, 11), (10, 12)]
INITIAL_DIRECTION = UP
FOOD_SCORE = 10

# Tick cadence (milliseconds)
INITIAL_SPEED = 150
MIN_SPEED = 50
SPEED_STEP = 10
SCORE_PER_SPEED_STEP = 30


def opposite(direction: str) -> str:
    """Return the direction pointing the other way."""
    return OPPOSITE_DIRECTION[direction]


def parse_direction(value: str) -> str:
    """
    Normalize a user-supplied direction string.

    Args:
        value: e.g. "up", " Left ", "RIGHT"

    Returns:
        One of: "UP", "DOWN", "LEFT", "RIGHT"

    Raises:
        ValueError: If the value is not a known direction.
    """
    if not isinstance(value, str):
        raise ValueError(f"Direction must be a string, got {type(value).__name__}")

    direction = value.strip().upper()
    if direction not in VALID_MOVES:
        valid = ", ".join(sorted(VALID_MOVES))
        raise ValueError(f"Unknown direction '{value}'. Valid directions: {valid}")
    return direction


def tick_interval_ms(score: int) -> int:
    """Scheduler interval for the given score; speeds up every 30 points down to MIN_SPEED."""
    return max(MIN_SPEED, INITIAL_SPEED - (score // SCORE_PER_SPEED_STEP) * SPEED_STEP)
