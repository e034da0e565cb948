"""Uniformly random legal moves."""

import logging
import random
from typing import Optional

from ..core import Board, ExhaustedBoardError, Move

logger = logging.getLogger(__name__)


def random_move(board: Board, rng: Optional[random.Random] = None) -> Move:
    """
    Produce a random legal move.

    Picks random (row, stick) positions until an unmarked stick turns up and
    uses it as the left bound. The right bound is drawn uniformly from the
    rest of the row, then pulled back to the last unmarked stick before the
    first marked one, so the range never crosses a marked stick.

    Args:
        board: Current board (not modified)
        rng: Random source; a freshly seeded generator when omitted

    Returns:
        A move that Board.apply_move accepts

    Raises:
        ExhaustedBoardError: if the board has no unmarked sticks
    """
    if board.unmarked_count() == 0:
        raise ExhaustedBoardError("Cannot produce a random move on an empty board")
    if rng is None:
        rng = random.Random()

    while True:
        row = rng.randint(1, board.row_count())
        row_length = board.row_length(row)
        left = rng.randint(1, row_length)
        if board.is_unmarked(row, left):
            break

    right = rng.randint(left, row_length)
    for stick in range(left + 1, right + 1):
        if not board.is_unmarked(row, stick):
            right = stick - 1
            break

    move = Move(row, left, right)
    logger.debug(f"Random move: {move}")
    return move
