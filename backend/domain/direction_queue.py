"""
DirectionQueue - buffers direction changes between ticks.

Input handlers append here at any time; the tick engine pops at most one
entry per tick. A request is admitted only if it is neither equal to nor
the opposite of the last direction the snake is going to take (the queue
tail, or the committed direction when the queue is empty).
"""

from collections import deque
from typing import Iterator, Optional

from .constants import OPPOSITE_DIRECTION


class DirectionQueue:
    """FIFO of pending direction changes with a reversal-rejecting admission rule."""

    def __init__(self):
        self._pending = deque()

    def peek_last(self, last_committed: str) -> str:
        """The direction the snake will be travelling after every queued turn."""
        if self._pending:
            return self._pending[-1]
        return last_committed

    def enqueue(self, requested: str, last_committed: str) -> bool:
        """
        Append `requested` unless it repeats or reverses the last wanted direction.

        Returns:
            True if the direction was queued, False if it was dropped.
        """
        last_wanted = self.peek_last(last_committed)
        if requested == last_wanted or OPPOSITE_DIRECTION[last_wanted] == requested:
            return False
        self._pending.append(requested)
        return True

    def dequeue_next(self) -> Optional[str]:
        """Pop the oldest pending direction, or None when nothing is queued."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def clear(self):
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[str]:
        return iter(self._pending)

    def __repr__(self):
        return f"<DirectionQueue pending={list(self._pending)}>"
