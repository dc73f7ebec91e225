"""Hexapawn board state: sides, moves and the immutable 3x3 board."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

from hexapawn.exceptions import IllegalMoveError, InvalidBoardError

BOARD_CELLS = 9
ROW_LENGTH = 3


class Side(Enum):
    """Contents of a cell, and the two colours that play."""

    EMPTY = (0, " ")
    BLACK = (1, "B")
    WHITE = (-1, "W")

    def __init__(self, row_direction: int, symbol: str) -> None:
        self.row_direction = row_direction
        self.symbol = symbol

    @property
    def opposite(self) -> "Side":
        """The opposing colour (EMPTY maps to itself)."""
        if self is Side.BLACK:
            return Side.WHITE
        if self is Side.WHITE:
            return Side.BLACK
        return Side.EMPTY

    @classmethod
    def colours(cls) -> Tuple["Side", "Side"]:
        """Playing colours in turn order."""
        return (cls.WHITE, cls.BLACK)

    @classmethod
    def from_symbol(cls, symbol: str) -> "Side":
        """Parse a single board character (``W``, ``B``, ``.`` or space)."""
        normalized = symbol.upper()
        if normalized in (".", " ", "_"):
            return cls.EMPTY
        for side in cls:
            if side.symbol == normalized:
                return side
        raise InvalidBoardError(f"Unknown cell symbol: {symbol!r}")


@dataclass(frozen=True, order=True)
class Move:
    """A pawn move from one cell index to another.

    Validity here is purely geometric; whether the move is playable depends
    on the board (see ``Board.is_valid_move``).

        6 7 8
        3 4 5
        0 1 2
    """

    from_cell: int
    to_cell: int

    def is_range_valid(self) -> bool:
        return 0 <= self.from_cell < BOARD_CELLS and 0 <= self.to_cell < BOARD_CELLS

    def is_row_gapped(self) -> bool:
        return abs(self.from_cell // ROW_LENGTH - self.to_cell // ROW_LENGTH) == 1

    def is_straight(self) -> bool:
        return abs(self.from_cell - self.to_cell) == 3

    def is_diagonal(self) -> bool:
        return abs(self.from_cell - self.to_cell) in (2, 4)

    def is_valid(self) -> bool:
        return (
            self.is_range_valid()
            and (self.is_straight() or self.is_diagonal())
            and self.is_row_gapped()
        )

    @property
    def direction(self) -> int:
        """+1 when moving toward higher rows, -1 otherwise."""
        return 1 if self.to_cell > self.from_cell else -1

    def __str__(self) -> str:
        return f"{self.from_cell}->{self.to_cell}"


@dataclass(frozen=True)
class Board:
    """
    Immutable Hexapawn board.

    Cells are stored row-major: row 0 is indices 0-2, row 2 is indices 6-8.
    White pawns move toward row 0 and Black pawns toward row 2. Boards compare
    and hash by content, so equal positions share one key in lookup tables.
    """

    cells: Tuple[Side, ...]

    def __init__(self, cells: Iterable[Side]) -> None:
        cells = tuple(cells)
        if len(cells) != BOARD_CELLS:
            raise InvalidBoardError(
                f"Board needs exactly {BOARD_CELLS} cells, got {len(cells)}"
            )
        object.__setattr__(self, "cells", cells)

    @classmethod
    def initial(cls) -> "Board":
        """Starting position: Black on row 0, White on row 2."""
        return cls(
            [Side.BLACK] * ROW_LENGTH + [Side.EMPTY] * ROW_LENGTH + [Side.WHITE] * ROW_LENGTH
        )

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a nine character string in index order.

        Args:
            text: e.g. ``"BBB...WWW"``; ``.`` or space marks an empty cell

        Returns:
            Parsed board
        """
        return cls(Side.from_symbol(ch) for ch in text)

    def __getitem__(self, index: int) -> Side:
        return self.cells[index]

    def is_valid_move(self, move: Move) -> bool:
        """
        Check whether a move can be played on this board.

        The origin must hold a pawn moving in the move's direction. A straight
        push needs an empty destination; a diagonal needs an enemy pawn there.
        """
        if not move.is_valid():
            return False
        mover = self.cells[move.from_cell]
        if mover is Side.EMPTY or mover.row_direction != move.direction:
            return False
        target = self.cells[move.to_cell]
        if move.is_straight() and target is not Side.EMPTY:
            return False
        if move.is_diagonal() and target is not mover.opposite:
            return False
        return True

    def apply_move(self, move: Move) -> "Board":
        """
        Play a move and return the resulting board.

        Raises:
            IllegalMoveError: If the move is not valid on this board
        """
        if not self.is_valid_move(move):
            raise IllegalMoveError(f"Move {move} is not valid on board {self.to_string()}")

        cells: List[Side] = list(self.cells)
        cells[move.to_cell] = cells[move.from_cell]
        cells[move.from_cell] = Side.EMPTY
        return Board(cells)

    def legal_moves(self, side: Side) -> FrozenSet[Move]:
        """
        All moves ``side`` can play on this board.

        Each pawn tries a push and both diagonal captures independently.
        """
        if side is Side.EMPTY:
            return frozenset()

        moves = set()
        for index in self.cells_of(side):
            for offset in (2, 3, 4):
                move = Move(index, index + offset * side.row_direction)
                if self.is_valid_move(move):
                    moves.add(move)
        return frozenset(moves)

    def winner_of(self, side_to_move_next: Side) -> Side:
        """
        Determine the winner, if any.

        Rules are checked in order: a White pawn on row 0, a Black pawn on
        row 2, a single piece left, then the opponent of ``side_to_move_next``
        having no legal moves.

        Args:
            side_to_move_next: Side credited with a win when its opponent is
                stalemated (the director passes the side that just moved)

        Returns:
            Winning side, or Side.EMPTY while the game continues
        """
        if any(cell is Side.WHITE for cell in self.cells[:ROW_LENGTH]):
            return Side.WHITE
        if any(cell is Side.BLACK for cell in self.cells[-ROW_LENGTH:]):
            return Side.BLACK

        pieces = [cell for cell in self.cells if cell is not Side.EMPTY]
        if len(pieces) == 1:
            return pieces[0]

        if not self.legal_moves(side_to_move_next.opposite):
            return side_to_move_next

        return Side.EMPTY

    def cells_of(self, side: Side) -> List[int]:
        """Indices of cells holding ``side``."""
        return [index for index, cell in enumerate(self.cells) if cell is side]

    def piece_count(self, side: Optional[Side] = None) -> int:
        """Number of pawns on the board, optionally for one side only."""
        if side is None:
            return sum(1 for cell in self.cells if cell is not Side.EMPTY)
        return len(self.cells_of(side))

    def to_string(self) -> str:
        """Compact nine character form, the inverse of ``from_string``."""
        return "".join(cell.symbol if cell is not Side.EMPTY else "." for cell in self.cells)

    def render(self) -> str:
        """
        Render the board as text, row 2 on top.

        Returns:
            Three lines such as ``|W|W|W|``
        """
        lines = []
        for row in reversed(range(ROW_LENGTH)):
            start = row * ROW_LENGTH
            row_cells = self.cells[start:start + ROW_LENGTH]
            lines.append("|" + "|".join(cell.symbol for cell in row_cells) + "|")
        return "\n".join(lines)
