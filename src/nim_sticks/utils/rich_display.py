"""
Rich-based console output for competitions.

Provides:
- Turn-by-turn messages
- Board rendering with stick numbers
- Result tables
- Human move prompts
"""

import logging
from typing import Dict, Optional, TextIO, Tuple

from rich import get_console
from rich.console import Console
from rich.prompt import IntPrompt
from rich.table import Table

from ..core import Board, Move

logger = logging.getLogger(__name__)

DISPLAY_BOARD = 1
MAKE_MOVE = 2


class CompetitionDisplay:
    """Console output for a competition."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize competition display.

        Args:
            console: Rich console to print to (rich global console by default)
        """
        self.console = console if console is not None else get_console()

    def log(self, message: str, style: str = ""):
        """Print a plain message."""
        self.console.print(message, style=style, markup=False, highlight=False)

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def show_header(self, title: str):
        """Show a rule with the title."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def board_table(self, board: Board) -> Table:
        """Board as a table: one line per row, one column per stick position."""
        max_length = max(board.row_length(row) for row in range(1, board.row_count() + 1))

        table = Table(box=None, padding=(0, 1))
        table.add_column("Row", style="cyan", justify="right")
        for stick in range(1, max_length + 1):
            table.add_column(str(stick), justify="center")

        for row in range(1, board.row_count() + 1):
            cells = []
            for stick in range(1, max_length + 1):
                if stick > board.row_length(row):
                    cells.append("")
                elif board.is_unmarked(row, stick):
                    cells.append("[bold green]|[/bold green]")
                else:
                    cells.append("[dim]·[/dim]")
            table.add_row(str(row), *cells)

        return table

    def show_board(self, board: Board):
        """Print the board."""
        self.console.print(self.board_table(board))

    def show_results(self, player1_score: int, player2_score: int):
        """Print the final score line."""
        self.log(f"The results are {player1_score}:{player2_score}")

    def show_tournament(self, results: Dict[Tuple[str, str], Tuple[int, int]], rounds: int):
        """Print one line per pairing with both scores."""
        table = Table(title=f"Tournament ({rounds} rounds per pairing)")
        table.add_column("Player 1", style="cyan")
        table.add_column("Player 2", style="magenta")
        table.add_column("Score", justify="center")
        table.add_column("P1 win %", justify="right")

        for (name1, name2), (score1, score2) in results.items():
            total = score1 + score2
            percent = (score1 / total * 100) if total > 0 else 0
            table.add_row(name1, name2, f"{score1}:{score2}", f"{percent:.1f}%")

        self.console.print(table)


class ConsoleHumanInput:
    """
    Ask a human for moves on the console.

    Offers to display the board until the player chooses to move, then
    reads the row and the left and right stick indices.
    """

    def __init__(self, display: Optional[CompetitionDisplay] = None, stream: Optional[TextIO] = None):
        """
        Initialize console input.

        Args:
            display: Where to print prompts and the board
            stream: Read answers from this stream instead of the terminal
        """
        self.display = display or CompetitionDisplay()
        self.stream = stream

    def request_move(self, board: Board, player_id: int) -> Move:
        """Prompt until the player asks to move, then read the move."""
        choice = 0
        while choice != MAKE_MOVE:
            choice = self._ask_int("Press 1 to display the board. Press 2 to make a move:")
            if choice == DISPLAY_BOARD:
                self.display.show_board(board)
            elif choice != MAKE_MOVE:
                self.display.log("Unknown input.")

        row = self._ask_int("Enter the row number:")
        left = self._ask_int("Enter the index of the leftmost stick:")
        right = self._ask_int("Enter the index of the rightmost stick:")

        logger.debug(f"Player {player_id} entered {row}:{left}-{right}")
        return Move(row, left, right)

    def _ask_int(self, prompt: str) -> int:
        return IntPrompt.ask(prompt, console=self.display.console, stream=self.stream)


def setup_rich_logging(level: str = "WARNING"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
