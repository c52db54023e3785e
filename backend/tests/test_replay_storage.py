"""
Tests for services/replay_storage.py.
"""

import json
import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.replay_storage import (
    DEFAULT_REPLAY_DIR,
    get_replay_dir,
    get_replay_path,
    list_replays,
    load_replay,
    save_replay,
)


class TestReplayDir:
    """Tests for replay directory resolution."""

    def test_explicit_directory_wins(self, monkeypatch):
        monkeypatch.setenv("SNAKE_REPLAY_DIR", "/from/env")
        assert get_replay_dir("/explicit") == "/explicit"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("SNAKE_REPLAY_DIR", "/from/env")
        assert get_replay_dir() == "/from/env"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("SNAKE_REPLAY_DIR", raising=False)
        assert get_replay_dir() == DEFAULT_REPLAY_DIR

    def test_replay_path_layout(self):
        path = get_replay_path("abc-123", "/replays")
        assert path == os.path.join("/replays", "abc-123", "replay.json")


class TestSaveAndLoad:
    """Tests for save_replay / load_replay / list_replays."""

    def test_save_writes_json(self, tmp_path):
        data = {"metadata": {"game_id": "g1"}, "rounds": [{"score": 0}]}
        path = save_replay("g1", data, str(tmp_path))

        assert path == str(tmp_path / "g1" / "replay.json")
        with open(path) as f:
            assert json.load(f) == data

    def test_load_returns_saved_data(self, tmp_path):
        data = {"metadata": {"game_id": "g2"}, "rounds": []}
        save_replay("g2", data, str(tmp_path))
        assert load_replay("g2", str(tmp_path)) == data

    def test_load_missing_returns_none(self, tmp_path):
        assert load_replay("nope", str(tmp_path)) is None

    def test_load_corrupt_file_raises(self, tmp_path):
        game_dir = tmp_path / "bad"
        game_dir.mkdir()
        (game_dir / "replay.json").write_text("{not json")

        with pytest.raises(ValueError):
            load_replay("bad", str(tmp_path))

    def test_list_replays(self, tmp_path):
        save_replay("b", {}, str(tmp_path))
        save_replay("a", {}, str(tmp_path))
        (tmp_path / "empty-dir").mkdir()

        assert list_replays(str(tmp_path)) == ["a", "b"]

    def test_list_replays_missing_directory(self, tmp_path):
        assert list_replays(str(tmp_path / "missing")) == []
