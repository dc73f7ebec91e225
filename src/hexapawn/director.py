"""Game director: plays one game of Hexapawn between two agents."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from hexapawn.agents.base import Agent
from hexapawn.board import Board, Move, Side
from hexapawn.exceptions import AgentContractViolation
from hexapawn.tracking.game_log import GameRecorder

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Outcome of a finished game."""

    winner: Side
    num_moves: int
    final_board: Board
    moves: List[Tuple[Side, Move]] = field(default_factory=list)


class GameDirector:
    """Alternates turns between two agents until the board has a winner."""

    def __init__(
        self,
        verbose: bool = False,
        recorder: Optional[GameRecorder] = None,
    ) -> None:
        """
        Initialize the director.

        Args:
            verbose: If True, print legal moves, the winner and the final board
            recorder: Optional recorder receiving every game event
        """
        self.verbose = verbose
        self.recorder = recorder

    def conduct_game(self, white: Agent, black: Agent) -> GameResult:
        """
        Play a single game, White moving first.

        Args:
            white: Agent playing White
            black: Agent playing Black

        Returns:
            GameResult with the winner and the moves played

        Raises:
            AgentContractViolation: If an agent returns a move that is not
                legal for its side; the game is abandoned without end hooks
        """
        board = Board.initial()
        players: Dict[Side, Agent] = {Side.WHITE: white, Side.BLACK: black}
        for side, agent in players.items():
            agent.on_game_start(side)
        if self.recorder:
            self.recorder.log_game_start()

        moves: List[Tuple[Side, Move]] = []
        winner = Side.EMPTY
        turn = 0
        while winner is Side.EMPTY:
            current = Side.colours()[turn % 2]
            turn += 1

            if self.verbose:
                legal = sorted(board.legal_moves(current))
                print(f"Moves for {current.name}: {[str(m) for m in legal]}")

            move = players[current].get_move(board, current)
            if not board.is_valid_move(move) or move.direction != current.row_direction:
                if self.recorder:
                    self.recorder.log_error(
                        "Move not valid for board or player",
                        side=current.name,
                        move=str(move),
                        board=board.to_string(),
                    )
                raise AgentContractViolation(
                    f"Move {move} not valid for board or player {current.name}",
                    move=move,
                    side=current,
                )

            board = board.apply_move(move)
            moves.append((current, move))
            if self.recorder:
                self.recorder.log_move(current, move, board)

            winner = board.winner_of(current)

        logger.debug("Game over after %d moves, winner %s", len(moves), winner.name)
        if self.verbose:
            print(f"WINNER: {winner.name}")
            print(board.render())
        if self.recorder:
            self.recorder.log_game_end(winner, len(moves))

        for agent in players.values():
            agent.on_game_end(winner)

        return GameResult(winner=winner, num_moves=len(moves), final_board=board, moves=moves)
