"""Hexapawn with a rote-learning matchbox agent."""

from hexapawn.board import Board, Move, Side
from hexapawn.director import GameDirector, GameResult

__version__ = "0.1.0"

__all__ = ["Board", "Move", "Side", "GameDirector", "GameResult", "__version__"]
