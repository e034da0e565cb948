"""
Main CLI for the stick game.
"""

import argparse
import logging
import random
import sys

from ..game import Competition, Player, PLAYER1_ID, PLAYER2_ID
from ..strategies import COMPUTER_STRATEGIES, StrategyTag
from ..utils.rich_display import CompetitionDisplay, ConsoleHumanInput, setup_rich_logging


def strategy_arg(text: str) -> StrategyTag:
    """argparse type for player types."""
    try:
        return StrategyTag.parse(text)
    except ValueError as e:
        choices = ", ".join(f"{tag.value}={tag.name.lower()}" for tag in StrategyTag)
        raise argparse.ArgumentTypeError(f"{e} (choose from {choices})")


def positive_int(text: str) -> int:
    """argparse type for round counts."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not an integer")
    if value < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1")
    return value


def play_command(args):
    """Play a competition between two players."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)

    player1 = Player(PLAYER1_ID, args.player1)
    player2 = Player(PLAYER2_ID, args.player2)

    has_human = player1.is_human or player2.is_human
    display_messages = args.show_messages or has_human

    display = CompetitionDisplay()
    human_input = ConsoleHumanInput(display) if has_human else None
    rng = random.Random(args.seed)

    logger.info(f"Player 1: {player1.type_name}, player 2: {player2.type_name}, rounds: {args.rounds}")
    competition = Competition(
        player1,
        player2,
        display_messages=display_messages,
        display=display,
        human_input=human_input,
        rng=rng,
    )

    competition.play_multiple_rounds(args.rounds, progress=not display_messages)

    display.show_results(
        competition.get_player_score(player1.player_id),
        competition.get_player_score(player2.player_id),
    )


def tournament_command(args):
    """Play every pairing of computer strategies."""
    setup_rich_logging(args.log_level)

    display = CompetitionDisplay()
    rng = random.Random(args.seed)

    display.show_header("Nim strategy tournament")
    results = {}
    for tag1 in COMPUTER_STRATEGIES:
        for tag2 in COMPUTER_STRATEGIES:
            player1 = Player(PLAYER1_ID, tag1)
            player2 = Player(PLAYER2_ID, tag2)
            display.log_info(f"{player1.type_name} vs {player2.type_name}")

            competition = Competition(player1, player2, display=display, rng=rng)
            competition.play_multiple_rounds(args.rounds, progress=True)
            results[(player1.type_name, player2.type_name)] = (
                competition.get_player_score(player1.player_id),
                competition.get_player_score(player2.player_id),
            )

    display.show_tournament(results, args.rounds)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Multi-row stick game (Nim) competitions")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a competition between two players")
    play_parser.add_argument(
        "player1", type=strategy_arg, help="Type of player 1: random (1), heuristic (2), smart (3) or human (4)"
    )
    play_parser.add_argument("player2", type=strategy_arg, help="Type of player 2")
    play_parser.add_argument("rounds", type=positive_int, help="Number of rounds to play")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="RNG seed for random players"
    )
    play_parser.add_argument(
        "--show-messages",
        action="store_true",
        help="Print turn-by-turn messages (always on when a human plays)",
    )
    play_parser.set_defaults(func=play_command)

    # Tournament command
    tournament_parser = subparsers.add_parser(
        "tournament", help="Play every pairing of computer strategies"
    )
    tournament_parser.add_argument(
        "--rounds", type=positive_int, default=100, help="Rounds per pairing"
    )
    tournament_parser.add_argument(
        "--seed", type=int, default=None, help="RNG seed for random players"
    )
    tournament_parser.set_defaults(func=tournament_command)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
