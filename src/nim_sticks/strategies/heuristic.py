"""
Heuristic strategy based on a fixed-width binary decomposition.

Every sequence length is written as a BINARY_LENGTH-digit binary number
(most significant digit first) and the digits are summed per row. The
digit-wise parity over all rows plays the role of the Nim-sum: the strategy
tries to remove a run that leaves every parity digit at zero, and falls back
to fixed end-game rules when few multi-stick sequences remain.

Three digits cover sequences of up to 7 sticks, the longest row of the
standard board.

The branch conditions and offsets below are tuned for this contiguous-run
variant and must not be replaced by plain Nim arithmetic.
"""

import logging
from dataclasses import dataclass
from typing import List

from ..core import Board, ExhaustedBoardError, Move
from .sequences import iter_row_sequences

logger = logging.getLogger(__name__)

BINARY_LENGTH = 3


def binary_digits(length: int) -> List[int]:
    """BINARY_LENGTH binary digits of a sequence length, most significant first."""
    return [(length >> (BINARY_LENGTH - bit - 1)) & 1 for bit in range(BINARY_LENGTH)]


@dataclass
class BoardDecomposition:
    """
    Result of scanning a board for the heuristic.

    last_single_row/last_single_stick hold the last stick of the last
    sequence seen, whatever its length; when every sequence is a single
    stick that is the last single stick on the board.
    """

    bins: List[List[int]]
    parity: List[int]
    multi_count: int = 0
    single_count: int = 0
    last_row: int = 0
    last_left: int = 0
    last_size: int = 0
    last_single_row: int = 0
    last_single_stick: int = 0
    sequence_count: int = 0


def decompose(board: Board) -> BoardDecomposition:
    """Scan the board once and collect everything the heuristic needs."""
    num_rows = board.row_count()
    result = BoardDecomposition(
        bins=[[0] * BINARY_LENGTH for _ in range(num_rows)],
        parity=[0] * BINARY_LENGTH,
    )

    for row in range(1, num_rows + 1):
        row_bins = result.bins[row - 1]
        for sequence in iter_row_sequences(board, row):
            for bit, digit in enumerate(binary_digits(sequence.length)):
                row_bins[bit] += digit

            if sequence.length > 1:
                result.multi_count += 1
                result.last_row = row
                result.last_left = sequence.left
                result.last_size = sequence.length
            else:
                result.single_count += 1
            result.last_single_row = row
            result.last_single_stick = sequence.right
            result.sequence_count += 1

        for bit in range(BINARY_LENGTH):
            result.parity[bit] = (result.parity[bit] + row_bins[bit]) % 2

    return result


def _find_run(board: Board, row: int, num_remove: int) -> int:
    """
    Left bound of the first run of num_remove unmarked sticks in a row.

    Returns 0 when the row has no such run.
    """
    run = 0
    stick = 0
    while run < num_remove and stick < board.row_length(row):
        if board.is_unmarked(row, stick + 1):
            run += 1
        else:
            run = 0
        stick += 1

    if run == num_remove:
        return stick - run + 1
    return 0


def _balancing_move(board: Board, scan: BoardDecomposition, bit: int) -> Move:
    """Try to clear the parity digit at `bit` (and the ones below it)."""
    erase_row = 0
    erase_size = 0
    final_sum = 0
    for row_index, row_bins in enumerate(scan.bins):
        if row_bins[bit] > 0:
            erase_row = row_index + 1
            erase_size = 2 ** (BINARY_LENGTH - bit - 1)
            for lower in range(bit + 1, BINARY_LENGTH):
                if scan.parity[lower] > 0:
                    if row_bins[lower] == 0:
                        final_sum += 2 ** (BINARY_LENGTH - lower - 1)
                    else:
                        final_sum -= 2 ** (BINARY_LENGTH - lower - 1)
            break

    num_remove = erase_size - final_sum
    left = _find_run(board, erase_row, num_remove)
    if left:
        return Move(erase_row, left, left + num_remove - 1)

    # Marked sticks split the row; no run of the right size exists
    logger.debug(f"No run of {num_remove} in row {erase_row}, falling back")
    return Move(scan.last_row, scan.last_left, scan.last_left)


def heuristic_move(board: Board) -> Move:
    """
    Produce a move with the binary decomposition heuristic.

    Args:
        board: Current board (not modified)

    Returns:
        A legal move

    Raises:
        ExhaustedBoardError: if the board has no unmarked sticks
    """
    scan = decompose(board)
    if scan.sequence_count == 0:
        raise ExhaustedBoardError("Cannot produce a heuristic move on an empty board")

    # Only single sticks left
    if scan.multi_count == 0:
        move = Move(scan.last_single_row, scan.last_single_stick, scan.last_single_stick)
        logger.debug(f"Heuristic move (singles only): {move}")
        return move

    # End game: one multi-stick sequence
    if scan.multi_count == 1:
        if scan.single_count == 0:
            right = scan.last_left + (scan.last_size - 1) - 1
        else:
            right = scan.last_left + (scan.last_size - 1) - (1 - scan.single_count % 2)
        move = Move(scan.last_row, scan.last_left, right)
        logger.debug(f"Heuristic move (end game, {scan.single_count} singles): {move}")
        return move

    for bit in range(BINARY_LENGTH - 1):
        if scan.parity[bit] > 0:
            move = _balancing_move(board, scan, bit)
            logger.debug(f"Heuristic move (parity bit {bit}): {move}")
            return move

    if scan.parity[BINARY_LENGTH - 1] > 0:
        move = Move(scan.last_single_row, scan.last_single_stick, scan.last_single_stick)
        logger.debug(f"Heuristic move (lowest parity bit): {move}")
        return move

    # Already balanced
    move = Move(scan.last_row, scan.last_left, scan.last_left)
    logger.debug(f"Heuristic move (balanced): {move}")
    return move
