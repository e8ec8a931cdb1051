"""
Constants and exit codes for Submission Gate.
"""

import os


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    POLICY_REJECTED = 1
    SETUP_FAILED = 2
    EXTRACTION_FAILED = 3
    NO_ARCHIVE_FOUND = 4


# Prohibited JS frameworks for pure Vanilla JS submissions
FORBIDDEN_FRAMEWORKS = ("react", "vue", "@angular/core", "nuxt", "next")

MANIFEST_FILENAME = "package.json"
ENTRY_POINT_FILENAME = "index.html"
ENTRY_POINT_SUFFIX = ".html"
PROHIBITED_DIRECTORY = "node_modules"

# Files whose shallowest occurrence marks the project root
ROOT_MARKERS = (MANIFEST_FILENAME, ENTRY_POINT_FILENAME)

ZIP_SUFFIXES = (".zip",)
TAR_SUFFIXES = (".tar", ".tar.gz", ".tgz")
ARCHIVE_SUFFIXES = ZIP_SUFFIXES + TAR_SUFFIXES

SUBMISSION_TYPES = ("sub1", "sub2")

DEFAULT_WATCH_DIR = os.path.join("~", "Personal", "temp", "dicoding-submission")
DEFAULT_RUNNER_SCRIPT = "runner.js"
DEFAULT_NODE_BIN = "node"
WORKSPACE_PREFIX = "submission-gate-"
