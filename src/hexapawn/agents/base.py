"""Base class and protocol for Hexapawn agents."""

from typing import Protocol

from hexapawn.board import Board, Move, Side


class Agent(Protocol):
    """Protocol for Hexapawn agents."""

    def get_move(self, board: Board, side: Side) -> Move:
        """
        Choose a move for ``side`` on ``board``.

        Args:
            board: Current board
            side: Colour to move

        Returns:
            A move that must be legal for ``side`` on ``board``
        """
        ...

    def on_game_start(self, side: Side) -> None:
        """
        Called before the first move of a game.

        Args:
            side: Colour this agent plays in the new game
        """
        ...

    def on_game_end(self, winner: Side) -> None:
        """
        Called once the game has a winner.

        Args:
            winner: Winning colour
        """
        ...


class BaseAgent:
    """Default no-op game hooks for agents that do not track games."""

    def on_game_start(self, side: Side) -> None:
        """Start of game (no-op)."""
        pass

    def on_game_end(self, winner: Side) -> None:
        """End of game (no-op)."""
        pass
