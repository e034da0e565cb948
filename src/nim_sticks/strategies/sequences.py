"""Scanning a board for maximal runs of unmarked sticks."""

from dataclasses import dataclass
from typing import Iterator

from ..core import Board


@dataclass(frozen=True)
class Sequence:
    """A maximal run of unmarked sticks within one row."""

    row: int
    left: int
    length: int

    @property
    def right(self) -> int:
        return self.left + self.length - 1


def iter_row_sequences(board: Board, row: int) -> Iterator[Sequence]:
    """Yield the sequences of one row, left to right."""
    for stick in range(1, board.row_length(row) + 1):
        # A run starts where the previous position is marked or off the row
        if board.is_unmarked(row, stick) and not board.is_unmarked(row, stick - 1):
            right = stick
            while board.is_unmarked(row, right + 1):
                right += 1
            yield Sequence(row=row, left=stick, length=right - stick + 1)


def iter_sequences(board: Board) -> Iterator[Sequence]:
    """Yield every sequence on the board, rows in order."""
    for row in range(1, board.row_count() + 1):
        yield from iter_row_sequences(board, row)
