"""
Greedy player - heads straight for the food when it is safe to do so.
"""

from domain.constants import DIRECTION_DELTAS
from domain.game_state import GameState
from .random_player import RandomPlayer


class GreedyPlayer(RandomPlayer):
    """
    Chooses the safe move that brings the head closest (Manhattan distance)
    to the food. Falls back to RandomPlayer behaviour when nothing is safe.
    """

    name = "greedy"

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)
        if not valid_moves:
            return super().get_move(game_state)

        head_x, head_y = game_state.snake.head
        food_x, food_y = game_state.food

        def distance(move: str) -> int:
            dx, dy = DIRECTION_DELTAS[move]
            return abs(head_x + dx - food_x) + abs(head_y + dy - food_y)

        # Prefer keeping the current direction on ties
        return min(valid_moves, key=lambda move: (distance(move), move != game_state.direction))
