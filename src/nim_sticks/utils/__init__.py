"""Console display and input utilities."""

from .rich_display import (
    CompetitionDisplay,
    ConsoleHumanInput,
    setup_rich_logging,
)

__all__ = [
    "CompetitionDisplay",
    "ConsoleHumanInput",
    "setup_rich_logging",
]
