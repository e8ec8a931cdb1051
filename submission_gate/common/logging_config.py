"""Logging setup for submission_gate.

Log records go to stderr. Stdout belongs to the CLI verdict lines and to the
E2E runner's pass-through output, so the two never interleave in a pipe.
Modules obtain loggers with `get_logger(__name__)`; all of them live under
the `submission_gate` logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SUBMISSION_GATE_LOG_LEVEL"
PROJECT_LOGGER = "submission_gate"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _parse_level(level: str | int | None) -> tuple[int, Optional[str]]:
    """Return the numeric level and, when the name was unknown, that name."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, int):
        return level, None
    name = level.strip().upper()
    if name in _LEVEL_MAP:
        return _LEVEL_MAP[name], None
    return logging.INFO, level


def configure_logging(level: str | int | None = None, *, force: bool = False) -> logging.Logger:
    """Configure logging and return the project logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `SUBMISSION_GATE_LOG_LEVEL`
    3. Fallback to `INFO`

    Unknown level names fall back to INFO with a warning.
    """
    numeric_level, invalid_level = _parse_level(level)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
    logger = logging.getLogger(PROJECT_LOGGER)
    logger.setLevel(numeric_level)
    if invalid_level:
        logger.warning(
            "Invalid log level %r; falling back to INFO. Valid values: %s.",
            invalid_level,
            ", ".join(sorted(_LEVEL_MAP)),
        )
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger, configuring logging lazily on first access."""
    logger = logging.getLogger(name or PROJECT_LOGGER)
    if not logging.getLogger().handlers:  # pragma: no cover - defensive
        configure_logging()
    return logger


__all__ = ["configure_logging", "get_logger", "LOG_LEVEL_ENV", "PROJECT_LOGGER"]
