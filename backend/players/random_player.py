"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.constants import OPPOSITE_DIRECTION, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Picks a random direction that avoids walls, self-collisions and reversals.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, pick any non-reversing move (we'll die anyway)
        if not valid_moves:
            reverse = OPPOSITE_DIRECTION[game_state.direction]
            return self.rng.choice(sorted(VALID_MOVES - {reverse}))

        return self.rng.choice(valid_moves)
