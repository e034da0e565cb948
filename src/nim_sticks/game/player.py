"""Players and the human input seam."""

from dataclasses import dataclass
from typing import Protocol

from ..core import Board, Move
from ..strategies import StrategyTag

PLAYER1_ID = 1
PLAYER2_ID = 2


@dataclass(frozen=True)
class Player:
    """A contestant: its id (1 or 2) and how it picks moves."""

    player_id: int
    strategy: StrategyTag

    def __post_init__(self) -> None:
        """Validate player invariants."""
        if self.player_id not in (PLAYER1_ID, PLAYER2_ID):
            raise ValueError(f"Invalid player id {self.player_id}, must be 1 or 2")
        if not isinstance(self.strategy, StrategyTag):
            raise ValueError(f"Unknown player type {self.strategy!r}")

    @property
    def is_human(self) -> bool:
        return self.strategy is StrategyTag.HUMAN

    @property
    def type_name(self) -> str:
        """Display name of the player type, e.g. "Heuristic"."""
        return self.strategy.display_name


class HumanMoveProvider(Protocol):
    """Source of moves for human players."""

    def request_move(self, board: Board, player_id: int) -> Move:
        ...
