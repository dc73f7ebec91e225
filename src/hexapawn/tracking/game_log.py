"""JSONL game recording for training runs."""

import json
import threading
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from hexapawn.board import Board, Move, Side


class EventType(str, Enum):
    """Types of events that can be recorded."""

    GAME_START = "game_start"
    MOVE = "move"
    GAME_END = "game_end"
    ERROR = "error"
    INFO = "info"


class GameEvent(BaseModel):
    """Recorded game event."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: EventType = Field(..., description="Type of event")
    run_id: str = Field(..., description="Run identifier")
    game_index: Optional[int] = Field(None, description="Game number within the run")
    message: str = Field(..., description="Event message")
    data: Dict[str, Any] = Field(
        default_factory=dict, description="Additional event data"
    )


class GameRecorder:
    """Thread-safe recorder of game events for one run."""

    def __init__(self, run_id: str, logs_dir: Path):
        """Initialize the recorder.

        Args:
            run_id: Identifier of the training run
            logs_dir: Directory to store log files
        """
        self.run_id = run_id
        self.logs_dir = logs_dir
        self.run_log_dir = logs_dir / "runs" / run_id
        self.run_log_dir.mkdir(parents=True, exist_ok=True)

        self.games_log_file = self.run_log_dir / "games.jsonl"
        self.game_index = 0

        self._lock = threading.Lock()

    def log_event(
        self,
        event_type: EventType,
        message: str,
        **data: Any,
    ) -> None:
        """Record an event for the current game.

        Args:
            event_type: Type of event
            message: Event message
            **data: Additional event data
        """
        event = GameEvent(
            event_type=event_type,
            run_id=self.run_id,
            game_index=self.game_index,
            message=message,
            data=data,
        )
        self._write_event(event)

    def log_game_start(self) -> None:
        """Start a new game and record it."""
        self.game_index += 1
        self.log_event(EventType.GAME_START, f"Game {self.game_index} started")

    def log_move(self, side: Side, move: Move, board: Board) -> None:
        """Record a move and the board it produced.

        Args:
            side: Colour that moved
            move: Move played
            board: Board after the move
        """
        self.log_event(
            EventType.MOVE,
            f"{side.name} plays {move}",
            side=side.name,
            from_cell=move.from_cell,
            to_cell=move.to_cell,
            board=board.to_string(),
        )

    def log_game_end(self, winner: Side, num_moves: int) -> None:
        self.log_event(
            EventType.GAME_END,
            f"Winner: {winner.name}",
            winner=winner.name,
            num_moves=num_moves,
        )

    def log_error(self, error: str, **kwargs: Any) -> None:
        self.log_event(EventType.ERROR, error, error=error, **kwargs)

    def log_info(self, message: str, **kwargs: Any) -> None:
        self.log_event(EventType.INFO, message, **kwargs)

    def get_game_events(self, game_index: int) -> List[GameEvent]:
        """Get all events for one game.

        Args:
            game_index: Game number within the run

        Returns:
            List of events for the game
        """
        return [event for event in self._read_events() if event.game_index == game_index]

    def get_recent_events(self, limit: int = 100) -> List[GameEvent]:
        """Get the most recent events of the run.

        Args:
            limit: Maximum number of events to return

        Returns:
            List of recent events
        """
        return self._read_events()[-limit:]

    def _read_events(self) -> List[GameEvent]:
        events = []

        if self.games_log_file.exists():
            with open(self.games_log_file, "r", encoding="utf-8") as f:
                for line in f:
                    try:
                        events.append(GameEvent(**json.loads(line.strip())))
                    except (json.JSONDecodeError, ValueError):
                        continue

        return events

    def _write_event(self, event: GameEvent) -> None:
        with self._lock:
            with open(self.games_log_file, "a", encoding="utf-8") as f:
                json.dump(event.model_dump(mode="json"), f, default=str, separators=(",", ":"))
                f.write("\n")
