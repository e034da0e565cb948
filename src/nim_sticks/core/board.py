"""
Board representation for the stick game.

The standard board has four rows; row i (1-indexed) holds 2*i - 1 sticks:

    1: |
    2: | | |
    3: | | | | |
    4: | | | | | | |

A move marks a contiguous run of unmarked sticks in a single row. Sticks are
never removed, only marked, so row lengths stay fixed for the whole round.
"""

from typing import List, Optional, Tuple

from .errors import MoveRejectedError, OutOfRangeError
from .move import Move

NUM_ROWS = 4
STANDARD_ROW_LENGTHS: Tuple[int, ...] = tuple(2 * i - 1 for i in range(1, NUM_ROWS + 1))


class Board:
    """
    Mutable row/stick grid for a single round.

    Rows and sticks are 1-indexed throughout. Only the marked flags change
    after construction.
    """

    def __init__(self) -> None:
        self._marked: List[List[bool]] = [[False] * length for length in STANDARD_ROW_LENGTHS]
        self._unmarked = sum(STANDARD_ROW_LENGTHS)

    def row_count(self) -> int:
        """Number of rows on the board."""
        return len(self._marked)

    def row_length(self, row: int) -> int:
        """Stick count of a row (marked and unmarked)."""
        return len(self._row(row))

    def is_unmarked(self, row: int, stick: int) -> bool:
        """
        Check whether a stick is still unmarked.

        Stick positions outside 1..row_length(row) report False, exactly like
        a marked stick. Sequence scanning relies on this to find the end of a
        run at the row edges without separate bounds checks.

        Raises:
            OutOfRangeError: if the row does not exist
        """
        sticks = self._row(row)
        if stick < 1 or stick > len(sticks):
            return False
        return not sticks[stick - 1]

    def unmarked_count(self) -> int:
        """Total unmarked sticks left on the board."""
        return self._unmarked

    def is_legal(self, move: Move) -> bool:
        """True if apply_move(move) would succeed."""
        return self._rejection_reason(move) is None

    def apply_move(self, move: Move) -> None:
        """
        Mark every stick in move's range.

        The move is applied completely or not at all.

        Raises:
            MoveRejectedError: if the row or bounds are out of range, or any
                stick in the range is already marked
        """
        reason = self._rejection_reason(move)
        if reason is not None:
            raise MoveRejectedError(move, reason)

        sticks = self._marked[move.row - 1]
        for stick in range(move.left, move.right + 1):
            sticks[stick - 1] = True
        self._unmarked -= move.size

    def snapshot(self) -> Tuple[Tuple[bool, ...], ...]:
        """Unmarked flags for every row, as an immutable value."""
        return tuple(tuple(not marked for marked in sticks) for sticks in self._marked)

    def copy(self) -> "Board":
        """Independent copy of this board."""
        other = Board()
        other._marked = [list(sticks) for sticks in self._marked]
        other._unmarked = self._unmarked
        return other

    def _row(self, row: int) -> List[bool]:
        if row < 1 or row > len(self._marked):
            raise OutOfRangeError(f"Row {row} out of range 1..{len(self._marked)}")
        return self._marked[row - 1]

    def _rejection_reason(self, move: Move) -> Optional[str]:
        if move.row < 1 or move.row > len(self._marked):
            return f"row must be between 1 and {len(self._marked)}"

        length = len(self._marked[move.row - 1])
        if not 1 <= move.left <= move.right <= length:
            return f"bounds must satisfy 1 <= left <= right <= {length}"

        for stick in range(move.left, move.right + 1):
            if not self.is_unmarked(move.row, stick):
                return f"stick {stick} is already marked"

        return None

    def __str__(self) -> str:
        """One line per row: '|' for unmarked sticks, blank for marked ones."""
        lines = []
        for row, sticks in enumerate(self._marked, start=1):
            cells = " ".join(" " if marked else "|" for marked in sticks)
            lines.append(f"{row}: {cells}".rstrip())
        return "\n".join(lines)
