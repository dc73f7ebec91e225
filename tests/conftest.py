"""Shared fixtures for Hexapawn tests."""

from collections import deque
from typing import Dict, Set, Tuple

import matplotlib

matplotlib.use("Agg")

import pytest

from hexapawn.board import Board, Side


def reachable_situations() -> Set[Tuple[Board, Side]]:
    """All (board, side to move) pairs reachable from the starting position."""
    start = (Board.initial(), Side.WHITE)
    seen = {start}
    queue = deque([start])
    while queue:
        board, side = queue.popleft()
        for move in board.legal_moves(side):
            after = board.apply_move(move)
            if after.winner_of(side) is not Side.EMPTY:
                continue
            nxt = (after, side.opposite)
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


@pytest.fixture(scope="session")
def situations() -> Set[Tuple[Board, Side]]:
    return reachable_situations()
