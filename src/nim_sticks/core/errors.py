"""Exceptions raised by the board and the strategy engine."""


class NimError(Exception):
    """Base class for all game errors."""


class OutOfRangeError(NimError, IndexError):
    """Row index outside the board."""


class MoveRejectedError(NimError, ValueError):
    """
    An illegal move was submitted to the board.

    The board is left untouched, so the caller can ask for another move.
    """

    def __init__(self, move, reason: str):
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move
        self.reason = reason


class ExhaustedBoardError(NimError, RuntimeError):
    """A strategy was asked for a move on a board with no unmarked sticks."""
