"""Path traversal protection for archive extraction."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


def strip_root_prefix(entry_name: str) -> str:
    """Make an archive entry name relative.

    Leading slashes, drive letters (``C:``) and UNC prefixes are dropped, so
    ``/index.html`` lands at the top of the extraction root the way archive
    tools place it. ``..`` segments are kept for the containment check.
    """
    name = entry_name.replace("\\", "/")
    name = _DRIVE_PREFIX.sub("", name)
    return name.lstrip("/")


def is_within(root: Path, candidate: Path) -> bool:
    """Return True when `candidate` equals `root` or lies strictly beneath it.

    Both paths are expected to be canonical already.
    """
    return candidate == root or root in candidate.parents


def resolve_destination(root: Union[str, Path], entry_name: str) -> Optional[Path]:
    """Compute where `entry_name` would land under `root`.

    Returns None when the canonical destination escapes `root`, e.g. for
    `../../etc/passwd`. Nothing is created on disk.
    """
    dest_root = Path(root).resolve()
    target = (dest_root / strip_root_prefix(entry_name)).resolve()
    if not is_within(dest_root, target):
        return None
    return target
