"""Game recording for Hexapawn runs."""

from hexapawn.tracking.game_log import EventType, GameEvent, GameRecorder

__all__ = ["EventType", "GameEvent", "GameRecorder"]
