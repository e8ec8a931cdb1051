"""Registry for CLI subcommands."""

from .check_command import CheckCommand
from .latest_command import LatestCommand
from .review_command import ReviewCommand

COMMANDS = (
    ReviewCommand,
    CheckCommand,
    LatestCommand,
)

__all__ = ["COMMANDS", "ReviewCommand", "CheckCommand", "LatestCommand"]
