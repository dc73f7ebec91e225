"""Tests for the JSONL game recorder."""

import json

from hexapawn.board import Board, Move, Side
from hexapawn.tracking import EventType, GameEvent, GameRecorder


class TestGameRecorder:
    """Test GameRecorder."""

    def test_creates_run_directory(self, tmp_path):
        recorder = GameRecorder("run-a", tmp_path)

        assert recorder.run_log_dir == tmp_path / "runs" / "run-a"
        assert recorder.run_log_dir.is_dir()

    def test_events_written_as_json_lines(self, tmp_path):
        recorder = GameRecorder("run-a", tmp_path)
        recorder.log_game_start()
        board = Board.initial().apply_move(Move(7, 4))
        recorder.log_move(Side.WHITE, Move(7, 4), board)

        lines = recorder.games_log_file.read_text().splitlines()
        assert len(lines) == 2
        first, second = (json.loads(line) for line in lines)
        assert first["event_type"] == "game_start"
        assert first["run_id"] == "run-a"
        assert second["data"] == {
            "side": "WHITE",
            "from_cell": 7,
            "to_cell": 4,
            "board": "BBB.W.W.W",
        }

    def test_game_index_advances(self, tmp_path):
        recorder = GameRecorder("run-a", tmp_path)
        recorder.log_game_start()
        recorder.log_game_end(Side.WHITE, 3)
        recorder.log_game_start()
        recorder.log_info("second game")

        assert [e.event_type for e in recorder.get_game_events(1)] == [
            EventType.GAME_START,
            EventType.GAME_END,
        ]
        second = recorder.get_game_events(2)
        assert second[-1].message == "second game"

    def test_recent_events_limit(self, tmp_path):
        recorder = GameRecorder("run-a", tmp_path)
        for i in range(5):
            recorder.log_info(f"event {i}")

        recent = recorder.get_recent_events(limit=2)
        assert [e.message for e in recent] == ["event 3", "event 4"]

    def test_corrupt_lines_skipped(self, tmp_path):
        recorder = GameRecorder("run-a", tmp_path)
        recorder.log_error("boom")
        with open(recorder.games_log_file, "a", encoding="utf-8") as f:
            f.write("not json\n")

        events = recorder.get_recent_events()
        assert len(events) == 1
        assert isinstance(events[0], GameEvent)
        assert events[0].data["error"] == "boom"

    def test_no_file_no_events(self, tmp_path):
        assert GameRecorder("run-b", tmp_path).get_recent_events() == []
