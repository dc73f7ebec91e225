"""Random agent that plays uniformly at random among legal moves."""

import numpy as np

from hexapawn.agents.base import BaseAgent
from hexapawn.board import Board, Move, Side


class RandomAgent(BaseAgent):
    """Agent that selects moves uniformly at random from legal moves."""

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility (optional)
        """
        self.rng = np.random.default_rng(seed)

    def get_move(self, board: Board, side: Side) -> Move:
        """
        Select a random legal move.

        Args:
            board: Current board
            side: Colour to move

        Returns:
            Randomly selected move from ``board.legal_moves(side)``
        """
        moves = sorted(board.legal_moves(side))
        if not moves:
            raise ValueError(f"No legal moves available for {side.name}")
        return moves[int(self.rng.integers(len(moves)))]
