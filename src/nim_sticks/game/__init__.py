"""Round loop, players and score keeping."""

from .competition import Competition, RoundResult
from .player import PLAYER1_ID, PLAYER2_ID, HumanMoveProvider, Player

__all__ = [
    "Competition",
    "RoundResult",
    "Player",
    "HumanMoveProvider",
    "PLAYER1_ID",
    "PLAYER2_ID",
]
