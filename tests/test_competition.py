"""Tests for the competition round loop."""

import io
import random

import pytest
from rich.console import Console

from nim_sticks.core import Move, MoveRejectedError
from nim_sticks.game import Competition, Player, RoundResult
from nim_sticks.game import competition as competition_module
from nim_sticks.strategies import StrategyTag
from nim_sticks.utils import CompetitionDisplay, ConsoleHumanInput


class ScriptedHuman:
    """Human move provider that replays a fixed list of moves."""

    def __init__(self, moves):
        self.moves = list(moves)
        self.requests = []

    def request_move(self, board, player_id):
        self.requests.append(player_id)
        return self.moves.pop(0)


def make_display():
    buffer = io.StringIO()
    return CompetitionDisplay(Console(file=buffer, width=200)), buffer


def test_smart_round_outcome():
    """Test a smart-vs-smart round: 12 turns, player 2 marks the last stick."""
    competition = Competition(Player(1, StrategyTag.SMART), Player(2, StrategyTag.SMART))

    result = competition.play_round()

    assert result == RoundResult(winner_id=1, turns=12)
    assert competition.get_player_score(1) == 1
    assert competition.get_player_score(2) == 0


def test_smart_rounds_terminate_within_16_turns():
    """Test every round ends within one turn per stick."""
    competition = Competition(Player(1, StrategyTag.SMART), Player(2, StrategyTag.SMART))

    for result in competition.play_multiple_rounds(5):
        assert 1 <= result.turns <= 16


def test_scores_sum_to_rounds():
    """Test every round awards exactly one point."""
    competition = Competition(
        Player(1, StrategyTag.RANDOM),
        Player(2, StrategyTag.HEURISTIC),
        rng=random.Random(11),
    )

    results = competition.play_multiple_rounds(50)

    assert len(results) == 50
    score1 = competition.get_player_score(1)
    score2 = competition.get_player_score(2)
    assert score1 + score2 == 50
    assert competition.rounds_played == 50
    assert score1 == sum(1 for r in results if r.winner_id == 1)
    assert all(r.turns <= 16 for r in results)


def test_deterministic_players_repeat_outcome():
    """Test deterministic strategies win the same way every round."""
    competition = Competition(Player(1, StrategyTag.HEURISTIC), Player(2, StrategyTag.SMART))

    results = competition.play_multiple_rounds(4)

    assert len(set(results)) == 1


def test_last_stick_loses():
    """Test the player who marks the last stick loses the round."""
    human = ScriptedHuman([
        Move(1, 1, 1),  # P1
        Move(2, 1, 3),  # P2
        Move(3, 1, 5),  # P1
        Move(4, 1, 7),  # P2 marks the last stick
    ])
    competition = Competition(
        Player(1, StrategyTag.HUMAN),
        Player(2, StrategyTag.HUMAN),
        human_input=human,
    )

    result = competition.play_round()

    assert result == RoundResult(winner_id=1, turns=4)
    assert human.requests == [1, 2, 1, 2]


def test_rejected_human_move_is_requested_again():
    """Test an illegal human move is rejected and asked for again."""
    display, buffer = make_display()
    human = ScriptedHuman([
        Move(1, 1, 2),  # Past the end of row 1
        Move(1, 1, 1),
        Move(2, 1, 3),
        Move(3, 1, 5),
        Move(4, 1, 6),
        Move(4, 7, 7),
    ])
    competition = Competition(
        Player(1, StrategyTag.HUMAN),
        Player(2, StrategyTag.HUMAN),
        display_messages=True,
        display=display,
        human_input=human,
    )

    result = competition.play_round()

    # P1 took the last stick on the fifth successful turn
    assert result == RoundResult(winner_id=2, turns=5)
    assert human.requests == [1, 1, 2, 1, 2, 1]

    output = buffer.getvalue()
    assert "Welcome to the sticks game!" in output
    assert "Player 1, it is now your turn!" in output
    assert output.count("Invalid move. Enter another:") == 1
    assert "Player 1 made the move: 1:1-1" in output
    assert "Player 2 won!" in output


def test_messages_hidden_by_default():
    """Test only the start announcement is printed without messages."""
    display, buffer = make_display()
    competition = Competition(
        Player(1, StrategyTag.SMART), Player(2, StrategyTag.HEURISTIC), display=display
    )

    competition.play_multiple_rounds(2)

    output = buffer.getvalue()
    assert (
        "Starting a Nim competition of 2 rounds between a Smart player and a Heuristic player."
        in output
    )
    assert "Welcome" not in output
    assert "won!" not in output


def test_human_against_computer_with_console_input():
    """Test a human typing moves on the console against the smart strategy."""
    display, buffer = make_display()
    # Human (P1) empties rows one at a time; smart (P2) answers in between
    stream = io.StringIO("\n".join([
        "2", "1", "1", "1",
        "2", "3", "1", "5",
        "2", "4", "1", "7",
    ]) + "\n")
    competition = Competition(
        Player(1, StrategyTag.HUMAN),
        Player(2, StrategyTag.SMART),
        display_messages=True,
        display=display,
        human_input=ConsoleHumanInput(display, stream=stream),
    )

    result = competition.play_round()

    # P1 marks row 1, P2 row 2's first stick, P1 row 3, P2 marks 2:2-3,
    # P1 marks all of row 4 and loses
    assert result == RoundResult(winner_id=2, turns=5)
    assert "Player 2 made the move: 2:2-3" in buffer.getvalue()


def test_rejected_computer_move_propagates(monkeypatch):
    """Test a broken strategy is not retried forever."""
    monkeypatch.setattr(competition_module, "produce_move", lambda tag, board, rng: Move(1, 1, 3))
    competition = Competition(Player(1, StrategyTag.SMART), Player(2, StrategyTag.SMART))

    with pytest.raises(MoveRejectedError):
        competition.play_round()


def test_invalid_setup():
    """Test construction errors."""
    with pytest.raises(ValueError):
        Player(3, StrategyTag.SMART)

    with pytest.raises(ValueError):
        Player(1, 3)

    with pytest.raises(ValueError):
        Competition(Player(1, StrategyTag.SMART), Player(1, StrategyTag.RANDOM))

    # Human player without an input provider
    with pytest.raises(ValueError):
        Competition(Player(1, StrategyTag.HUMAN), Player(2, StrategyTag.SMART))


def test_unknown_player_score():
    """Test asking for the score of a missing player."""
    competition = Competition(Player(1, StrategyTag.SMART), Player(2, StrategyTag.SMART))

    assert competition.get_player_score(1) == 0
    with pytest.raises(ValueError):
        competition.get_player_score(3)


def test_player_type_names():
    """Test player display names."""
    assert Player(1, StrategyTag.RANDOM).type_name == "Random"
    assert Player(2, StrategyTag.HUMAN).type_name == "Human"
    assert Player(2, StrategyTag.HUMAN).is_human
