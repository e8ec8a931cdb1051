"""Locate the real project root inside an extracted submission.

Students often zip a wrapper folder (or several) around their project. The
project root is the shallowest directory holding a `package.json` or an
`index.html`. Resolution is best effort: it never raises and falls back to
the extraction root when nothing better is found.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from ..common.constants import ROOT_MARKERS
from ..common.logging_config import get_logger

_log = get_logger(__name__)


def _log_walk_error(exc: OSError) -> None:
    _log.debug("Ignoring unreadable path during root resolution: %s", exc)


def resolve_project_root(base_dir: Union[str, Path], markers: Optional[Iterable[str]] = None) -> Path:
    """Return the shallowest directory under `base_dir` containing a marker file.

    Directories are walked top-down in lexical order, so among markers at the
    same depth the first one walked wins.
    """
    base = Path(base_dir)
    marker_names = frozenset(ROOT_MARKERS if markers is None else markers)
    project_root = base
    shortest_depth: Optional[int] = None

    try:
        for dirpath, dirnames, filenames in os.walk(base, onerror=_log_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if filename not in marker_names:
                    continue
                if not os.path.isfile(os.path.join(dirpath, filename)):
                    continue
                depth = len(Path(dirpath).parts)
                if shortest_depth is None or depth < shortest_depth:
                    shortest_depth = depth
                    project_root = Path(dirpath)
    except OSError as exc:
        _log.warning("Root resolution failed for %s, using it as is: %s", base, exc)
        return base

    return project_root
