"""Auto-discovery command handling for the submission-gate CLI."""

from submission_gate.cli_helpers import exit_with_error, map_exception_to_exit_code
from submission_gate.common.config import ReviewSettings
from submission_gate.common.constants import ExitCodes
from submission_gate.common.errors import SetupError
from submission_gate.core.discovery import find_latest_archive


class LatestCommand:
    """Print the archive the review command would pick by default."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('latest', help='Show the newest archive in the watch directory')
        parser.add_argument('--watch-dir', dest='watch_dir', default=None,
                            help='Directory to search (defaults to SUBMISSION_GATE_WATCH_DIR)')
        parser.set_defaults(func=LatestCommand.execute)

    @staticmethod
    def execute(args) -> None:
        settings = ReviewSettings.from_env().with_overrides(watch_dir=args.watch_dir)
        try:
            print(find_latest_archive(settings.watch_dir))
        except SetupError as exc:
            exit_with_error(str(exc), map_exception_to_exit_code(exc) or ExitCodes.SETUP_FAILED)
