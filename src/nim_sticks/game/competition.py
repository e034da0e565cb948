"""
Multi-round competition between two players.

Each round starts on a fresh standard board with player 1 to move. Players
alternate until every stick is marked; whoever marked the last stick loses,
so the player due to move next wins the round.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from tqdm import tqdm

from ..core import Board, Move, MoveRejectedError
from ..strategies import produce_move
from ..utils.rich_display import CompetitionDisplay
from .player import HumanMoveProvider, Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one round."""

    winner_id: int
    turns: int


class Competition:
    """
    Plays rounds between two players and keeps the score.

    Moves of computer players come from the strategy engine; moves of human
    players come from the injected human_input provider. A rejected human
    move is requested again. A rejected computer move means a broken
    strategy and propagates.
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        display_messages: bool = False,
        display: Optional[CompetitionDisplay] = None,
        human_input: Optional[HumanMoveProvider] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize competition.

        Args:
            player1: Player who moves first in every round
            player2: The other player
            display_messages: Print turn-by-turn messages
            display: Output target (a default CompetitionDisplay when omitted)
            human_input: Move provider for human players
            rng: Random source shared by random players

        Raises:
            ValueError: if both players have the same id, or a human player
                has no move provider
        """
        if player1.player_id == player2.player_id:
            raise ValueError(f"Both players have id {player1.player_id}")
        if (player1.is_human or player2.is_human) and human_input is None:
            raise ValueError("A human player needs a human_input provider")

        self.player1 = player1
        self.player2 = player2
        self.display_messages = display_messages
        self.display = display or CompetitionDisplay()
        self.human_input = human_input
        self.rng = rng or random.Random()
        self._scores = {player1.player_id: 0, player2.player_id: 0}
        self.current_player = player1

    def get_player_score(self, player_id: int) -> int:
        """
        Rounds won so far by a player.

        Raises:
            ValueError: if no player has that id
        """
        if player_id not in self._scores:
            raise ValueError(f"No player with id {player_id}")
        return self._scores[player_id]

    @property
    def rounds_played(self) -> int:
        return sum(self._scores.values())

    def play_multiple_rounds(self, num_rounds: int, progress: bool = False) -> List[RoundResult]:
        """
        Play a number of rounds.

        Args:
            num_rounds: Rounds to play
            progress: Show a tqdm progress bar (ignored while messages are shown)

        Returns:
            Result of every round, in order
        """
        self.display.log(
            f"Starting a Nim competition of {num_rounds} rounds between a "
            f"{self.player1.type_name} player and a {self.player2.type_name} player."
        )

        results = []
        with tqdm(
            total=num_rounds,
            desc="Rounds",
            unit=" round",
            disable=not progress or self.display_messages,
        ) as pbar:
            for _ in range(num_rounds):
                results.append(self.play_round())
                pbar.update(1)

        logger.info(
            f"Competition finished: {self.get_player_score(self.player1.player_id)}:"
            f"{self.get_player_score(self.player2.player_id)}"
        )
        return results

    def play_round(self) -> RoundResult:
        """Play one round on a fresh board and award the point."""
        board = Board()
        self._message("Welcome to the sticks game!")

        self.current_player = self.player1
        turns = 0
        while board.unmarked_count() > 0:
            self._turn(board)
            turns += 1
            self._change_current_player()

        # The loser marked the last stick, so the player now due to move wins
        winner = self.current_player
        self._scores[winner.player_id] += 1
        self._message(f"Player {winner.player_id} won!")
        logger.info(f"Round won by player {winner.player_id} ({winner.type_name}) in {turns} turns")
        return RoundResult(winner_id=winner.player_id, turns=turns)

    def _change_current_player(self) -> None:
        if self.current_player is self.player1:
            self.current_player = self.player2
        else:
            self.current_player = self.player1

    def _turn(self, board: Board) -> None:
        player = self.current_player
        self._message(f"Player {player.player_id}, it is now your turn!")

        while True:
            move = self._request_move(player, board)
            try:
                board.apply_move(move)
            except MoveRejectedError as e:
                if not player.is_human:
                    raise
                logger.warning(f"Player {player.player_id}: {e}")
                self._message("Invalid move. Enter another:")
                continue
            break

        self._message(f"Player {player.player_id} made the move: {move}")

    def _request_move(self, player: Player, board: Board) -> Move:
        if player.is_human:
            return self.human_input.request_move(board, player.player_id)
        return produce_move(player.strategy, board, self.rng)

    def _message(self, message: str) -> None:
        if self.display_messages:
            self.display.log(message)
