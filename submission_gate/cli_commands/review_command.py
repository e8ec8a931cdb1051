"""Full review command handling for the submission-gate CLI."""

import sys

from submission_gate.cli_helpers import exit_with_error, map_exception_to_exit_code
from submission_gate.common.config import ReviewSettings
from submission_gate.common.constants import SUBMISSION_TYPES, ExitCodes
from submission_gate.common.errors import SubmissionGateError
from submission_gate.core.pipeline import ReviewPipeline, ReviewResult, ReviewStatus


def report_result(result: ReviewResult) -> None:
    """Print the outcome of a review and exit non-zero on rejection."""
    if result.rejected:
        exit_with_error(f"[REJECTED] Static validation failed: {result.reason}", ExitCodes.POLICY_REJECTED)

    print("[PASS] Static validation successful. No prohibited frameworks or 'node_modules' detected.")
    if result.project_subpath and result.project_subpath != ".":
        print(f"[INFO] Project root resolved to: {result.project_subpath}")

    if not result.runner_invoked:
        return
    if result.status == ReviewStatus.NEEDS_REVIEW:
        print("[WARNING] E2E pipeline finished with failures. Manual review required.")
    else:
        print("[SUCCESS] Automated E2E pipeline executed successfully.")


def run_pipeline(settings: ReviewSettings, submission_type: str, archive, run_runner: bool) -> None:
    try:
        result = ReviewPipeline(settings).run(submission_type, archive, run_runner=run_runner)
    except SubmissionGateError as exc:
        exit_code = map_exception_to_exit_code(exc)
        if exit_code is None:
            exit_code = ExitCodes.SETUP_FAILED
        exit_with_error(str(exc), exit_code)
        return
    report_result(result)
    sys.stdout.flush()


class ReviewCommand:
    """Handles the static gate followed by the E2E hand-off."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add review command parser to subparsers."""
        parser = subparsers.add_parser('review', help='Validate a submission archive and run the E2E runner')
        parser.add_argument('submission_type', choices=SUBMISSION_TYPES,
                            help='Submission type forwarded to the E2E runner')
        parser.add_argument('archive', nargs='?', default=None,
                            help='Archive to review (defaults to the newest archive in the watch directory)')
        parser.add_argument('--watch-dir', dest='watch_dir', default=None,
                            help='Directory searched when no archive is given')
        parser.add_argument('--runner', dest='runner_script', default=None,
                            help='Path to the E2E runner script')
        parser.add_argument('--node', dest='node_bin', default=None,
                            help='Node.js executable used to start the runner')
        parser.add_argument('--static-only', action='store_true',
                            help='Stop after static validation and root resolution')
        parser.set_defaults(func=ReviewCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Run the review pipeline."""
        settings = ReviewSettings.from_env().with_overrides(
            watch_dir=args.watch_dir,
            runner_script=args.runner_script,
            node_bin=args.node_bin,
        )
        run_runner = not (args.static_only or settings.skip_runner)
        run_pipeline(settings, args.submission_type, args.archive, run_runner)
