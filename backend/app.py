import os
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from domain import parse_direction
from main import SnakeGame

load_dotenv()

app = Flask(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

# Enable CORS for API routes so a browser frontend on another origin can drive the game
# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

CORS(app, resources={r"/api/*": {"origins": allowed_origins}})

_seed = os.getenv("SNAKE_SEED")
game = SnakeGame(seed=int(_seed) if _seed else None)


@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@app.route("/api/game", methods=["GET"])
def get_game():
    """
    Current state snapshot, for renderers polling every frame.

    Returns the state dict plus the queued directions and the game id.
    """
    try:
        state = game.get_current_state().to_dict()
        state["pending_directions"] = game.pending_directions()
        state["game_id"] = game.game_id
        return jsonify(state)

    except Exception as error:
        logging.error(f"Error fetching game state: {error}")
        return jsonify({"error": "Failed to load game state"}), 500


@app.route("/api/game/reset", methods=["POST"])
def reset_game():
    """Start a new game (also used to restart after game over)."""
    try:
        state = game.reset()
        return jsonify(state.to_dict())

    except Exception as error:
        logging.error(f"Error resetting game: {error}")
        return jsonify({"error": "Failed to reset game"}), 500


@app.route("/api/game/direction", methods=["POST"])
def enqueue_direction():
    """
    Queue a direction change.

    Body: {"direction": "LEFT"}

    Reversals are not an error: the response reports accepted=false.
    """
    payload = request.get_json(silent=True) or {}
    raw_direction = payload.get("direction")
    if raw_direction is None:
        return jsonify({"error": "Missing 'direction' in request body"}), 400

    try:
        direction = parse_direction(raw_direction)
    except ValueError as error:
        return jsonify({"error": str(error)}), 400

    try:
        accepted = game.enqueue_direction(direction)
        return jsonify({
            "accepted": accepted,
            "direction": direction,
            "pending": game.pending_directions()
        })

    except Exception as error:
        logging.error(f"Error queueing direction {direction}: {error}")
        return jsonify({"error": "Failed to queue direction"}), 500


@app.route("/api/game/step", methods=["POST"])
def step_game():
    """
    Advance one tick. Called by the client-side scheduler every
    tick_interval_ms; a no-op once the game is over or before it starts.
    """
    try:
        state = game.step()
        return jsonify(state.to_dict())

    except Exception as error:
        logging.error(f"Error stepping game: {error}")
        return jsonify({"error": "Failed to advance game"}), 500


@app.route("/api/game/board", methods=["GET"])
def get_board():
    return jsonify({"board": game.get_current_state().print_board()})


if __name__ == "__main__":
    # Run the Flask app in debug mode.
    app.run(debug=os.getenv("FLASK_DEBUG"))
