import os
import json
import time
import uuid
import random
import logging
import argparse
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from dotenv import load_dotenv

from domain import (
    DirectionQueue,
    GameState,
    Snake,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    initial_state,
    step as step_state,
)
from players import get_player_class, AVAILABLE_PLAYERS
from services.replay_storage import save_replay

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Single owner of one game's state.

    Manages:
      - GameState (snake, food, score, direction, lifecycle flags)
      - DirectionQueue fed by input handlers
      - The random source used for food placement
      - History for replay

    reset(), enqueue_direction() and step() are the only mutation points and
    are serialised by a lock, so input handlers and the tick scheduler may
    live on different threads. Observers return values or copies.
    """

    def __init__(self, seed: Optional[int] = None, game_id: Optional[str] = None):
        self.seed = seed
        self.rng = random.Random(seed)
        self.queue = DirectionQueue()
        self._lock = threading.Lock()

        if game_id is None:
            self.game_id = str(uuid.uuid4())
        else:
            self.game_id = game_id

        # Not started yet: the state exists but ticks are no-ops until reset()
        self.state = GameState(
            snake=Snake(list(INITIAL_SNAKE)),
            food=(5, 5),
            direction=INITIAL_DIRECTION,
            is_running=False
        )

        self.start_time: Optional[float] = None
        self.history: List[GameState] = []
        self.move_history: List[Optional[str]] = []

    # ------------------------------------------------------------------
    # Mutation points
    # ------------------------------------------------------------------

    def reset(self) -> GameState:
        """Start (or restart) the game and return a snapshot of the initial state."""
        with self._lock:
            self.queue.clear()
            self.state = initial_state(self.rng)
            self.start_time = time.time()
            self.history = [self.state.copy()]
            self.move_history = []
            logger.info(f"Game {self.game_id} started, food at {self.state.food}")
            return self.state.copy()

    def enqueue_direction(self, direction: str) -> bool:
        """
        Buffer a direction change for an upcoming tick.

        Reversals and repeats of the last wanted direction are dropped silently;
        the return value only reports whether the request was queued.
        """
        with self._lock:
            accepted = self.queue.enqueue(direction, self.state.direction)
            if not accepted:
                logger.debug(f"Rejected direction {direction} (committed {self.state.direction}, pending {list(self.queue)})")
            return accepted

    def step(self) -> GameState:
        """Apply one tick and return a snapshot of the resulting state."""
        with self._lock:
            if not self.state.is_running or self.state.is_over:
                return self.state.copy()

            pending = len(self.queue)
            step_state(self.state, self.queue, self.rng)
            # Direction committed this tick, None if nothing was dequeued
            self.move_history.append(self.state.direction if len(self.queue) < pending else None)
            self.history.append(self.state.copy())
            return self.state.copy()

    # ------------------------------------------------------------------
    # Read-only observers
    # ------------------------------------------------------------------

    @property
    def snake(self) -> List[Tuple[int, int]]:
        return list(self.state.snake)

    @property
    def food(self) -> Tuple[int, int]:
        return self.state.food

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def direction(self) -> str:
        return self.state.direction

    @property
    def tick_interval_ms(self) -> int:
        return self.state.tick_interval_ms

    def pending_directions(self) -> List[str]:
        return list(self.queue)

    def get_current_state(self) -> GameState:
        """Return a snapshot of the current board as a GameState."""
        return self.state.copy()

    # ------------------------------------------------------------------
    # Replay
    # ------------------------------------------------------------------

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded states to a JSON-serializable list of dicts.
        Each entry carries the direction that was dequeued on that tick.
        """
        output = []
        for index, state in enumerate(self.history):
            state_dict = state.to_dict()
            state_dict["committed_move"] = self.move_history[index - 1] if index > 0 else None
            output.append(state_dict)
        return output

    def save_history_to_json(self, directory: Optional[str] = None) -> str:
        """Write metadata plus every recorded tick through the replay storage service."""
        start = self.start_time or time.time()
        metadata = {
            "game_id": self.game_id,
            "seed": self.seed,
            "start_time": datetime.fromtimestamp(start, tz=timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "final_score": self.state.score,
            "final_length": len(self.state.snake),
            "ticks": self.state.tick,
            "is_over": self.state.is_over,
            "death_reason": self.state.death_reason,
        }

        data = {
            "metadata": metadata,
            "rounds": self.serialize_history()
        }

        return save_replay(self.game_id, data, directory)

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.state.print_board() + "\n")

    def __repr__(self):
        return f"<SnakeGame id={self.game_id} state={self.state!r}>"


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player_name: Optional[str] = None,
    max_ticks: int = 1000,
    seed: Optional[int] = None,
    realtime: bool = False,
    save: bool = False,
    replay_dir: Optional[str] = None,
    show_board: bool = False
) -> Dict[str, Any]:
    """
    Plays a single headless game with an automated player.

    The loop stands in for the external scheduler: ask the player for a
    direction, enqueue it, step once, and (in realtime mode) wait for the
    score-dependent tick interval.

    Args:
        player_name: One of AVAILABLE_PLAYERS (default player if None)
        max_ticks: Stop after this many ticks even if the snake is alive
        seed: Seed for food placement and the player's random choices
        realtime: Sleep tick_interval_ms between ticks
        save: Write the replay via the replay storage service
        replay_dir: Where replays go (defaults to SNAKE_REPLAY_DIR)
        show_board: Print the board after every tick

    Returns:
        A dictionary summarizing the game (game_id, score, ticks, length, death_reason).
    """
    player_cls = get_player_class(player_name)
    player = player_cls(rng=random.Random(seed))

    game = SnakeGame(seed=seed)
    game.reset()

    while not game.is_over and game.state.tick < max_ticks:
        direction = player.get_move(game.get_current_state())
        game.enqueue_direction(direction)
        game.step()

        if show_board:
            game.print_board()
        if realtime:
            time.sleep(game.tick_interval_ms / 1000.0)

    if not game.is_over:
        logger.info(f"Game {game.game_id} stopped at max ticks ({max_ticks})")

    result = {
        "game_id": game.game_id,
        "player": player.name,
        "score": game.score,
        "ticks": game.state.tick,
        "length": len(game.snake),
        "is_over": game.is_over,
        "death_reason": game.state.death_reason,
    }

    if save:
        result["replay_path"] = game.save_history_to_json(replay_dir)

    return result


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv: Optional[List[str]] = None):
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    parser = argparse.ArgumentParser(
        description="Run a headless snake game with an automated player."
    )
    parser.add_argument("--player", type=str, default=None, choices=AVAILABLE_PLAYERS,
                        help="Automated player to use")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Maximum number of ticks before stopping")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (defaults to SNAKE_SEED if set)")
    parser.add_argument("--realtime", action="store_true",
                        help="Wait the score-dependent tick interval between ticks")
    parser.add_argument("--save", action="store_true",
                        help="Save the replay JSON when the game ends")
    parser.add_argument("--replay-dir", type=str, default=None,
                        help="Replay directory (defaults to SNAKE_REPLAY_DIR or completed_games)")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")

    args = parser.parse_args(argv)

    seed = args.seed
    if seed is None and os.getenv("SNAKE_SEED"):
        seed = int(os.getenv("SNAKE_SEED"))

    result = run_simulation(
        player_name=args.player,
        max_ticks=args.max_ticks,
        seed=seed,
        realtime=args.realtime,
        save=args.save,
        replay_dir=args.replay_dir,
        show_board=args.show_board
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
