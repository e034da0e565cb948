"""Parity-based simplified strategy."""

import logging

from ..core import Board, ExhaustedBoardError, Move
from .sequences import iter_sequences

logger = logging.getLogger(__name__)


def smart_move(board: Board) -> Move:
    """
    Produce a move from the parity of the number of sequences.

    Counts every sequence on the board and keeps the first one found. With
    an odd count the first stick of that sequence is marked; with an even
    count the whole sequence is marked.

    Raises:
        ExhaustedBoardError: if the board has no unmarked sticks
    """
    first = None
    num_sequences = 0
    for sequence in iter_sequences(board):
        if first is None:
            first = sequence
        num_sequences += 1

    if first is None:
        raise ExhaustedBoardError("Cannot produce a smart move on an empty board")

    if num_sequences % 2 != 0:
        move = Move(first.row, first.left, first.left)
    else:
        move = Move(first.row, first.left, first.right)

    logger.debug(f"Smart move: {move} ({num_sequences} sequences)")
    return move
