"""
Command Line Interface for Submission Gate.

Subcommands are registered from `submission_gate.cli_commands.COMMANDS`.
"""

import argparse
import sys
from typing import List, Optional

from ._version import __version__
from .cli_commands import COMMANDS
from .common.constants import ExitCodes
from .common.logging_config import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='submission-gate',
        description='Static gate for automatically reviewed front-end submissions'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--log-level', dest='log_level', default=None,
                        help='Logging level (overrides SUBMISSION_GATE_LOG_LEVEL)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    # If no arguments provided, show help
    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    configure_logging(parsed_args.log_level)

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
