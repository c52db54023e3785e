"""
Base player interface for headless games.
"""

from typing import List

from domain.constants import DIRECTION_DELTAS, OPPOSITE_DIRECTION, VALID_MOVES
from domain.game_state import GameState


class Player:
    """
    Base class/interface for automated snake control.

    A player stands in for the input device: each tick it is shown the
    current game state and returns the direction it wants to turn to.
    """

    name = "base"

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError

    @staticmethod
    def safe_moves(game_state: GameState) -> List[str]:
        """
        Directions that neither reverse the snake nor hit a wall or the body.
        The tail is not counted as an obstacle since it moves away this tick.
        """
        head_x, head_y = game_state.snake.head
        moves = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITE_DIRECTION[game_state.direction]:
                continue
            dx, dy = DIRECTION_DELTAS[move]
            new_head = (head_x + dx, head_y + dy)
            if not game_state.in_bounds(new_head):
                continue
            if game_state.snake.occupies(new_head, exclude_tail=True):
                continue
            moves.append(move)
        return moves
