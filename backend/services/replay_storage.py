"""
Local storage helper for game replay files.

Replays are organized by game ID so related artifacts can live side by
side: <directory>/<game_id>/replay.json
"""

import os
import json
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_REPLAY_DIR = "completed_games"
REPLAY_FILENAME = "replay.json"


def get_replay_dir(directory: Optional[str] = None) -> str:
    """Resolve the replay directory: explicit argument, then SNAKE_REPLAY_DIR, then the default."""
    return directory or os.getenv("SNAKE_REPLAY_DIR", DEFAULT_REPLAY_DIR)


def get_replay_path(game_id: str, directory: Optional[str] = None) -> str:
    return os.path.join(get_replay_dir(directory), game_id, REPLAY_FILENAME)


def save_replay(game_id: str, replay_data: Dict[str, Any], directory: Optional[str] = None) -> str:
    """
    Write a game replay to disk.

    Args:
        game_id: Unique game identifier (UUID)
        replay_data: Dictionary containing the complete game replay data
        directory: Base replay directory (see get_replay_dir)

    Returns:
        The path the replay was written to.

    Raises:
        OSError: If the file cannot be written
    """
    path = get_replay_path(game_id, directory)

    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w") as f:
            json.dump(replay_data, f, indent=2)
    except OSError as e:
        logger.error(f"Failed to save replay for game {game_id}: {e}")
        raise

    logger.info(f"Saved replay for game {game_id} to {path}")
    return path


def load_replay(game_id: str, directory: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Load and parse a game replay.

    Returns:
        Dictionary containing the replay data, or None if not found

    Raises:
        OSError, ValueError: If the file exists but cannot be read or parsed
    """
    path = get_replay_path(game_id, directory)

    if not os.path.exists(path):
        logger.warning(f"Replay not found for game {game_id}")
        return None

    try:
        with open(path) as f:
            replay_data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load replay for game {game_id}: {e}")
        raise

    return replay_data


def list_replays(directory: Optional[str] = None) -> List[str]:
    """Return the IDs of all games with a saved replay, sorted."""
    base = get_replay_dir(directory)
    if not os.path.isdir(base):
        return []

    return sorted(
        entry for entry in os.listdir(base)
        if os.path.isfile(os.path.join(base, entry, REPLAY_FILENAME))
    )
