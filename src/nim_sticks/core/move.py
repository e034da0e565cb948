"""Move value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """
    Marks the sticks left..right (inclusive, 1-indexed) of a row.

    Bounds are not validated here; Board.apply_move decides legality so that
    a human can type any three numbers and get a rejection back.
    """

    row: int
    left: int
    right: int

    @property
    def size(self) -> int:
        """Number of sticks the move marks."""
        return self.right - self.left + 1

    def __str__(self) -> str:
        return f"{self.row}:{self.left}-{self.right}"
