"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterator, List, Tuple

Point = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Point]):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Point:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def occupies(self, point: Point, exclude_tail: bool = False) -> bool:
        """
        Whether any segment sits on `point`.

        With exclude_tail=True the last segment is ignored, since it vacates
        its cell on the same tick the head moves.
        """
        if exclude_tail:
            return any(segment == point for segment in list(self.positions)[:-1])
        return point in self.positions

    def copy(self) -> "Snake":
        return Snake(list(self.positions))

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.positions)

    def __contains__(self, point) -> bool:
        return point in self.positions

    def __eq__(self, other) -> bool:
        if isinstance(other, Snake):
            return list(self.positions) == list(other.positions)
        return NotImplemented

    def __repr__(self):
        return f"<Snake length={len(self)} head={self.head}>"
