"""Shared CLI helpers for submission-gate commands."""

import sys
from typing import Optional

from submission_gate.common.constants import ExitCodes
from submission_gate.common.errors import (
    ExtractionIOError,
    NoArchiveFoundError,
    SetupError,
)


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to submission-gate exit codes."""
    if isinstance(exc, NoArchiveFoundError):
        return ExitCodes.NO_ARCHIVE_FOUND
    if isinstance(exc, SetupError):
        return ExitCodes.SETUP_FAILED
    if isinstance(exc, ExtractionIOError):
        return ExitCodes.EXTRACTION_FAILED
    return None
