"""Interactive agent that reads moves from the console."""

from typing import Callable, Optional

import click
from rich.console import Console

from hexapawn.agents.base import BaseAgent
from hexapawn.board import Board, Move, Side

# Returns None when the input could not be read. click.prompt re-asks on its own
# and never does, so only injected prompts exercise the re-ask loop below.
PromptFn = Callable[[str], Optional[int]]


def _click_prompt(label: str) -> Optional[int]:
    return click.prompt(label, type=int)


class HumanAgent(BaseAgent):
    """
    Agent driven by a person at the console.

    The board and the legal moves are shown before asking for a from-cell and
    a to-cell. The returned move is not checked here; an illegal move is
    rejected by the director like any other agent's.
    """

    def __init__(
        self,
        prompt: Optional[PromptFn] = None,
        console: Optional[Console] = None,
    ) -> None:
        """
        Initialize the human agent.

        Args:
            prompt: Callable returning an int (or None to re-ask) for a label;
                defaults to ``click.prompt`` with integer conversion
            console: Rich console used to show the board
        """
        self.prompt = prompt or _click_prompt
        self.console = console or Console()

    def get_move(self, board: Board, side: Side) -> Move:
        self.console.print(board.render())
        legal = ", ".join(str(move) for move in sorted(board.legal_moves(side)))
        self.console.print(f"[dim]{side.name} to move. Legal moves: {legal}[/dim]")

        from_cell = to_cell = None
        while from_cell is None or to_cell is None:
            from_cell = self.prompt("FROM")
            to_cell = self.prompt("TO")
        return Move(from_cell, to_cell)
