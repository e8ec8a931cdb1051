"""Submission Gate - static pre-check for graded front-end submissions.

Provides:
* Safe archive extraction with path traversal protection
* Deny-list checks on package.json dependencies
* node_modules and entry point (HTML) detection
* Project root resolution for archives with wrapper folders
* Thin CLI wrapper (`submission-gate`) that hands off to the E2E runner

Public helpers exported here are considered part of the semi-stable API. The
CLI remains the primary user interface.
"""

from ._version import __version__
from .common.logging_config import configure_logging  # noqa: F401
from .core.extractor import ExtractionPolicy, ExtractionVerdict, extract_and_validate  # noqa: F401
from .core.manifest import check_manifest  # noqa: F401
from .core.pipeline import ReviewPipeline, ReviewResult  # noqa: F401
from .core.resolver import resolve_project_root  # noqa: F401

__all__ = [
    "__version__",
    "configure_logging",
    "ExtractionPolicy",
    "ExtractionVerdict",
    "extract_and_validate",
    "check_manifest",
    "ReviewPipeline",
    "ReviewResult",
    "resolve_project_root",
]
