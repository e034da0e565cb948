"""Core board and move representation."""

from .board import Board, NUM_ROWS, STANDARD_ROW_LENGTHS
from .errors import ExhaustedBoardError, MoveRejectedError, NimError, OutOfRangeError
from .move import Move

__all__ = [
    "Board",
    "NUM_ROWS",
    "STANDARD_ROW_LENGTHS",
    "Move",
    "NimError",
    "OutOfRangeError",
    "MoveRejectedError",
    "ExhaustedBoardError",
]
