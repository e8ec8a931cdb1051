"""
Custom exception classes for Submission Gate.

Policy rejections are not exceptions: they are reported through
:class:`~submission_gate.core.extractor.ExtractionVerdict`. Everything here
means the tool itself could not do its job.
"""


class SubmissionGateError(Exception):
    """Base exception class for Submission Gate errors."""
    pass


class SetupError(SubmissionGateError):
    """Raised when the review cannot start (workspace, input or watch directory)."""
    pass


class ArchiveOpenError(SetupError):
    """Raised when the submitted archive cannot be opened or is not an archive."""
    pass


class NoArchiveFoundError(SetupError):
    """Raised when auto-discovery finds no archive in the watch directory."""
    pass


class ExtractionIOError(SubmissionGateError):
    """Raised when reading an entry or writing to the workspace fails mid-extraction."""

    def __init__(self, message: str, entry_name: str = "") -> None:
        super().__init__(message)
        self.entry_name = entry_name
