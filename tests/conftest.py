"""Shared fixtures for building submission archives in tests."""

from __future__ import annotations

import io
import os
import sys
import tarfile
import zipfile
from pathlib import Path
from typing import Dict, Optional, Union

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

EntryMap = Dict[str, Optional[Union[str, bytes]]]


def write_zip(path: Path, entries: EntryMap) -> Path:
    """Write `entries` (name -> content, None for directories) to a ZIP file in order."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in entries.items():
            if content is None:
                zf.writestr(name if name.endswith("/") else name + "/", b"")
                continue
            if isinstance(content, str):
                content = content.encode("utf-8")
            # ZipInfo keeps unsafe names such as ../x verbatim
            zf.writestr(zipfile.ZipInfo(name), content)
    return path


def write_tar(path: Path, entries: EntryMap) -> Path:
    with tarfile.open(path, "w:gz") as tar:
        for name, content in entries.items():
            info = tarfile.TarInfo(name.rstrip("/"))
            if content is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tar.addfile(info)
                continue
            if isinstance(content, str):
                content = content.encode("utf-8")
            info.size = len(content)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(content))
    return path


@pytest.fixture
def make_zip(tmp_path):
    def _make(entries: EntryMap, name: str = "submission.zip", directory: Optional[Path] = None) -> Path:
        return write_zip((directory or tmp_path) / name, entries)
    return _make


@pytest.fixture
def make_tar(tmp_path):
    def _make(entries: EntryMap, name: str = "submission.tar.gz") -> Path:
        return write_tar(tmp_path / name, entries)
    return _make
