"""Hexapawn exception classes."""


class HexapawnError(Exception):
    """Base exception for all Hexapawn errors."""

    pass


class InvalidBoardError(HexapawnError):
    """Raised when a board is built without exactly nine cells."""

    pass


class IllegalMoveError(HexapawnError):
    """Raised when a move that is not valid for the board is applied."""

    pass


class AgentContractViolation(HexapawnError):
    """Raised when an agent returns a move that is not legal for its side."""

    def __init__(self, message: str, move=None, side=None) -> None:
        super().__init__(message)
        self.move = move
        self.side = side


class UnwinnableFirstMoveError(HexapawnError):
    """Raised when a learning agent's opening situation is already exhausted."""

    pass


class ConfigurationError(HexapawnError):
    """Raised when configuration is invalid."""

    pass
