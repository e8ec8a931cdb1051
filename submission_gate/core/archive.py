"""Read-only views over the entries of ZIP and tar submissions."""

from __future__ import annotations

import tarfile
import zipfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, Iterator, List, Union

from ..common.constants import TAR_SUFFIXES
from ..common.errors import ArchiveOpenError
from ..common.logging_config import get_logger

_log = get_logger(__name__)


@dataclass(frozen=True)
class ArchiveEntry:
    """One file or directory record inside a submitted archive."""

    name: str
    is_dir: bool
    size: int
    mode: int
    opener: Callable[[], IO[bytes]]

    def open(self) -> IO[bytes]:
        """Return a fresh binary stream over the entry's content."""
        return self.opener()


def is_tar_path(path: Union[str, Path]) -> bool:
    return str(path).lower().endswith(TAR_SUFFIXES)


def _zip_entries(zf: zipfile.ZipFile) -> List[ArchiveEntry]:
    entries = []
    for info in zf.infolist():
        entries.append(ArchiveEntry(
            name=info.filename,
            is_dir=info.is_dir(),
            size=info.file_size,
            mode=(info.external_attr >> 16) & 0o777,
            opener=lambda info=info: zf.open(info),
        ))
    return entries


def _tar_entries(tar: tarfile.TarFile) -> List[ArchiveEntry]:
    entries = []
    for member in tar.getmembers():
        if not (member.isfile() or member.isdir()):
            _log.debug("Ignoring non-regular tar member %r", member.name)
            continue
        entries.append(ArchiveEntry(
            name=member.name + "/" if member.isdir() and not member.name.endswith("/") else member.name,
            is_dir=member.isdir(),
            size=member.size,
            mode=member.mode & 0o777,
            opener=lambda member=member: tar.extractfile(member),
        ))
    return entries


@contextmanager
def open_archive(path: Union[str, Path]) -> Iterator[List[ArchiveEntry]]:
    """Open `path` and yield its entries in the archive's native order.

    The entries are only readable inside the `with` block.

    Raises:
        ArchiveOpenError: if the file is missing, unreadable or not an archive.
    """
    path = Path(path)
    try:
        if is_tar_path(path):
            handle = tarfile.open(path, "r:*")
        else:
            handle = zipfile.ZipFile(path, "r")
    except (OSError, zipfile.BadZipFile, tarfile.TarError) as exc:
        raise ArchiveOpenError(f"failed to open archive {path}: {exc}") from exc

    with handle:
        try:
            if isinstance(handle, tarfile.TarFile):
                entries = _tar_entries(handle)
            else:
                entries = _zip_entries(handle)
        except (OSError, tarfile.TarError) as exc:
            raise ArchiveOpenError(f"failed to read archive index {path}: {exc}") from exc
        yield entries
