"""Auto-targeting of the newest submission archive."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from ..common.constants import ARCHIVE_SUFFIXES
from ..common.errors import NoArchiveFoundError, SetupError
from ..common.logging_config import get_logger

_log = get_logger(__name__)


def find_latest_archive(directory: Union[str, Path], suffixes: Iterable[str] = ARCHIVE_SUFFIXES) -> Path:
    """Return the most recently modified archive directly inside `directory`.

    Raises:
        SetupError: if the directory cannot be listed
        NoArchiveFoundError: if it holds no archive
    """
    directory = Path(directory)
    suffixes = tuple(suffix.lower() for suffix in suffixes)
    try:
        candidates = list(directory.iterdir())
    except OSError as exc:
        raise SetupError(f"could not read directory {directory}: {exc}") from exc

    latest: Optional[Path] = None
    latest_mtime = 0.0
    for candidate in candidates:
        if not candidate.name.lower().endswith(suffixes):
            continue
        try:
            if not candidate.is_file():
                continue
            mtime = candidate.stat().st_mtime
        except OSError:
            continue
        if latest is None or mtime > latest_mtime:
            latest = candidate
            latest_mtime = mtime

    if latest is None:
        raise NoArchiveFoundError(f"no archive files found in {directory}")

    _log.info("Acquired target: %s", latest)
    return latest
