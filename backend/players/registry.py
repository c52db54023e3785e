"""
Registry for automated players.
Maps player names (e.g., 'random', 'greedy') to player classes.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_greedy_player() -> Type[Player]:
    from .greedy_player import GreedyPlayer
    return GreedyPlayer


# Registry: maps player name -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "greedy": _get_greedy_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())

DEFAULT_PLAYER = "greedy"


def get_player_class(name: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given name.

    Args:
        name: One of AVAILABLE_PLAYERS. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If name is not recognized.
    """
    if not name or name.strip() == "":
        name = DEFAULT_PLAYER

    name = name.strip().lower()

    if name not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player '{name}'. Available players: {available}")

    return PLAYER_LOADERS[name]()


def list_players() -> List[dict]:
    """Return metadata about all available players."""
    return [
        {"key": "random", "description": "Uniformly random safe move"},
        {"key": "greedy", "description": "Closest-to-food safe move, random fallback"},
    ]
