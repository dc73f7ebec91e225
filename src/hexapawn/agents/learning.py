"""Rote-learning agent in the style of Gardner's matchbox learner."""

import logging
from typing import Dict, FrozenSet, Iterable, List, Tuple

import numpy as np

from hexapawn.agents.base import BaseAgent
from hexapawn.board import Board, Move, Side
from hexapawn.exceptions import UnwinnableFirstMoveError

logger = logging.getLogger(__name__)


class SituationPreferences:
    """Moves still trusted from one (side, board) situation."""

    def __init__(self, moves: Iterable[Move]) -> None:
        self._moves = set(moves)

    def remove(self, move: Move) -> None:
        """Stop trusting a move (ignored if already gone)."""
        self._moves.discard(move)

    def pick_move(self, rng: np.random.Generator) -> Move:
        """Pick a trusted move uniformly at random."""
        moves = sorted(self._moves)
        return moves[int(rng.integers(len(moves)))]

    def is_empty(self) -> bool:
        return not self._moves

    @property
    def moves(self) -> FrozenSet[Move]:
        return frozenset(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __contains__(self, move: object) -> bool:
        return move in self._moves

    def __repr__(self) -> str:
        return f"SituationPreferences({sorted(self._moves)!r})"


class LearningAgent(BaseAgent):
    """
    Tabular trial-and-error learner.

    Every situation seen for the first time trusts all of its legal moves.
    Moves are picked uniformly among the trusted ones. After a loss the game
    is walked backward from the last move: each played move is removed from
    its situation, and the walk continues to the previous move only while the
    situation just pruned has no trusted moves left.

    Preferences: Dict[Side, Dict[Board, SituationPreferences]], keyed by board
    content so equal positions share one entry.

    One instance is meant to be reused across a whole training run; it is not
    safe to share between concurrently running games.
    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the learning agent.

        Args:
            seed: Random seed for reproducibility
        """
        self.rng = np.random.default_rng(seed)
        self.preferences: Dict[Side, Dict[Board, SituationPreferences]] = {
            side: {} for side in Side.colours()
        }
        self.history: List[Tuple[Board, Move]] = []
        self.playing_as: Side = Side.BLACK

    def get_move(self, board: Board, side: Side) -> Move:
        """
        Select a move from the trusted moves of this situation.

        Args:
            board: Current board
            side: Colour to move

        Returns:
            Selected move

        Raises:
            UnwinnableFirstMoveError: If the opening situation of a game has
                no trusted moves left
        """
        situations = self.preferences[side]
        if board not in situations:
            situations[board] = SituationPreferences(board.legal_moves(side))
        prefs = situations[board]

        if prefs.is_empty():
            if not self.history:
                raise UnwinnableFirstMoveError(
                    "A strange game. The only winning move is not to play."
                )
            # Every move from here has lost before; guess.
            moves = sorted(board.legal_moves(side))
            move = moves[int(self.rng.integers(len(moves)))]
        else:
            move = prefs.pick_move(self.rng)

        self.history.append((board, move))
        return move

    def on_game_start(self, side: Side) -> None:
        """Remember our colour and start a fresh history."""
        self.playing_as = side
        self.history = []

    def on_game_end(self, winner: Side) -> None:
        """
        Prune the moves that led to a loss.

        Args:
            winner: Winning colour; nothing is learned from a win
        """
        if winner == self.playing_as:
            return

        situations = self.preferences[self.playing_as]
        pruned = 0
        for board, move in reversed(self.history):
            prefs = situations[board]
            prefs.remove(move)
            pruned += 1
            if not prefs.is_empty():
                break

        logger.debug(
            "%s lost: pruned %d of %d moves", self.playing_as.name, pruned, len(self.history)
        )

    def knowledge_size(self, side: Side) -> int:
        """Number of situations recorded for a side."""
        return len(self.preferences[side])

    def trusted_move_count(self, side: Side | None = None) -> int:
        """Total trusted moves, for one side or both."""
        return sum(len(prefs) for prefs in self._situations(side))

    def exhausted_situations(self, side: Side | None = None) -> int:
        """Number of situations with no trusted move left."""
        return sum(1 for prefs in self._situations(side) if prefs.is_empty())

    def get_stats(self) -> Dict[str, int]:
        """Get statistics about the preference table."""
        return {
            "num_situations": sum(self.knowledge_size(side) for side in Side.colours()),
            "trusted_moves": self.trusted_move_count(),
            "exhausted_situations": self.exhausted_situations(),
        }

    def _situations(self, side: Side | None) -> List[SituationPreferences]:
        sides = Side.colours() if side is None else (side,)
        return [prefs for s in sides for prefs in self.preferences[s].values()]
