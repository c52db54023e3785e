"""
GameState entity - the authoritative state of a single snake game.
"""

from typing import Any, Dict, List, Optional, Tuple

from .constants import GRID_SIZE, INITIAL_DIRECTION, tick_interval_ms
from .snake import Snake


class GameState:
    """
    The game at a specific point in time.

    Attributes:
        snake: the Snake (head first)
        direction: the committed direction applied on the next tick
        food: (x, y) position of the single food item
        score: non-negative multiple of 10
        is_over: terminal flag, set by a wall or self collision
        is_running: whether ticks are being applied at all
        tick: number of ticks that moved the snake
        death_reason: 'wall' or 'self' once the game is over
        grid_size: board dimension (square board)
    """

    def __init__(
        self,
        snake: Snake,
        food: Tuple[int, int],
        direction: str = INITIAL_DIRECTION,
        score: int = 0,
        is_over: bool = False,
        is_running: bool = False,
        tick: int = 0,
        death_reason: Optional[str] = None,
        grid_size: int = GRID_SIZE
    ):
        self.snake = snake
        self.food = food
        self.direction = direction
        self.score = score
        self.is_over = is_over
        self.is_running = is_running
        self.tick = tick
        self.death_reason = death_reason
        self.grid_size = grid_size

    @property
    def tick_interval_ms(self) -> int:
        return tick_interval_ms(self.score)

    def in_bounds(self, point: Tuple[int, int]) -> bool:
        x, y = point
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def copy(self) -> "GameState":
        """Return an independent snapshot of this state."""
        return GameState(
            snake=self.snake.copy(),
            food=self.food,
            direction=self.direction,
            score=self.score,
            is_over=self.is_over,
            is_running=self.is_running,
            tick=self.tick,
            death_reason=self.death_reason,
            grid_size=self.grid_size
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation, points as [x, y] lists."""
        snake_positions: List[List[int]] = [[x, y] for x, y in self.snake]
        return {
            "snake": snake_positions,
            "direction": self.direction,
            "food": [self.food[0], self.food[1]],
            "score": self.score,
            "is_over": self.is_over,
            "is_running": self.is_running,
            "tick": self.tick,
            "death_reason": self.death_reason,
            "grid_size": self.grid_size,
            "tick_interval_ms": self.tick_interval_ms,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first (top of the board), x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        fx, fy = self.food
        if self.in_bounds(self.food):
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Only the last digit fits in a single-character column
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, direction={self.direction}, food={self.food}, "
            f"length={len(self.snake)}, score={self.score}, over={self.is_over}>"
        )
