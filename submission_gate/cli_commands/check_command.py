"""Static-only check command handling for the submission-gate CLI."""

from submission_gate.cli_commands.review_command import run_pipeline
from submission_gate.common.config import ReviewSettings


class CheckCommand:
    """Run the static gate on one archive without starting the E2E runner."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('check', help='Run only the static checks on an archive')
        parser.add_argument('archive', help='Archive to check')
        parser.set_defaults(func=CheckCommand.execute)

    @staticmethod
    def execute(args) -> None:
        run_pipeline(ReviewSettings.from_env(), "check", args.archive, run_runner=False)
