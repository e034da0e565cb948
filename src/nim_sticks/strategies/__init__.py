"""Computer strategies and strategy dispatch."""

import random
from enum import IntEnum
from typing import Callable, Dict, Optional

from ..core import Board, Move
from .heuristic import heuristic_move
from .random_strategy import random_move
from .sequences import Sequence, iter_row_sequences, iter_sequences
from .smart import smart_move


class StrategyTag(IntEnum):
    """Kinds of player. Values are the numeric codes accepted on the command line."""

    RANDOM = 1
    HEURISTIC = 2
    SMART = 3
    HUMAN = 4

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, text: str) -> "StrategyTag":
        """
        Parse a strategy from its name ("smart") or numeric code ("3").

        Raises:
            ValueError: if the text names no known strategy
        """
        value = text.strip()
        if value.isdigit():
            try:
                return cls(int(value))
            except ValueError:
                raise ValueError(f"Unknown player type {text!r}") from None
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"Unknown player type {text!r}") from None


COMPUTER_STRATEGIES: Dict[StrategyTag, Callable[[Board], Move]] = {
    StrategyTag.RANDOM: random_move,
    StrategyTag.HEURISTIC: heuristic_move,
    StrategyTag.SMART: smart_move,
}


def produce_move(tag: StrategyTag, board: Board, rng: Optional[random.Random] = None) -> Move:
    """
    Produce the next move of a computer strategy.

    Args:
        tag: Strategy to use (any tag but HUMAN)
        board: Current board (not modified)
        rng: Random source for the random strategy

    Returns:
        A legal move

    Raises:
        ValueError: for HUMAN, whose moves come from an input provider
    """
    if tag is StrategyTag.RANDOM:
        return random_move(board, rng)
    strategy = COMPUTER_STRATEGIES.get(tag)
    if strategy is None:
        raise ValueError(f"{StrategyTag(tag).display_name} player has no computer strategy")
    return strategy(board)


__all__ = [
    "StrategyTag",
    "COMPUTER_STRATEGIES",
    "produce_move",
    "random_move",
    "heuristic_move",
    "smart_move",
    "Sequence",
    "iter_sequences",
    "iter_row_sequences",
]
