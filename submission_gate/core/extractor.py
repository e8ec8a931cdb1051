"""Archive extraction with on-the-fly static policy checks.

The extractor materializes a submission into a workspace while deciding
whether it is eligible for dynamic testing at all. Absolute rejections:

* a ``node_modules`` directory anywhere in the archive,
* a ``package.json`` declaring a deny-listed framework,
* no ``.html`` file anywhere in the project.

The first two stop the walk at the offending entry, so a rejected archive
is never fully unpacked.
"""

from __future__ import annotations

import enum
import os
import shutil
import tarfile
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional, Tuple, Union

from ..common.constants import (
    ENTRY_POINT_SUFFIX,
    FORBIDDEN_FRAMEWORKS,
    MANIFEST_FILENAME,
    PROHIBITED_DIRECTORY,
)
from ..common.errors import ExtractionIOError
from ..common.logging_config import get_logger
from .archive import ArchiveEntry, open_archive
from .manifest import check_manifest
from .path_guard import resolve_destination

_log = get_logger(__name__)

NO_ENTRY_POINT_REASON = "no HTML files found anywhere in the project"


@dataclass(frozen=True)
class ExtractionPolicy:
    """What the extractor rejects and what it looks for."""

    deny_list: Tuple[str, ...] = FORBIDDEN_FRAMEWORKS
    prohibited_directory: str = PROHIBITED_DIRECTORY
    entry_point_suffix: str = ENTRY_POINT_SUFFIX
    manifest_filename: str = MANIFEST_FILENAME

    @property
    def prohibited_reason(self) -> str:
        return f"ZIP contains prohibited '{self.prohibited_directory}' directory"


DEFAULT_POLICY = ExtractionPolicy()


@dataclass(frozen=True)
class ExtractionVerdict:
    """Outcome of one extraction pass."""

    accepted: bool
    reason: Optional[str] = None
    entry_point_found: bool = False

    @property
    def rejected(self) -> bool:
        return not self.accepted


class EntryAction(enum.Enum):
    CONTINUE = "continue"
    REJECT = "reject"
    FATAL = "fatal"


@dataclass(frozen=True)
class EntryOutcome:
    """Result of processing a single archive entry."""

    action: EntryAction
    detail: str = ""
    entry_point: bool = False

    @classmethod
    def proceed(cls, entry_point: bool = False) -> "EntryOutcome":
        return cls(EntryAction.CONTINUE, entry_point=entry_point)

    @classmethod
    def reject(cls, reason: str) -> "EntryOutcome":
        return cls(EntryAction.REJECT, reason)

    @classmethod
    def fatal(cls, message: str) -> "EntryOutcome":
        return cls(EntryAction.FATAL, message)


def _path_segments(entry_name: str) -> Tuple[str, ...]:
    return PurePosixPath(entry_name.replace("\\", "/")).parts


def _write_stream(entry: ArchiveEntry, target: Path) -> None:
    with entry.open() as source, open(target, "wb") as out_file:
        shutil.copyfileobj(source, out_file)


def _apply_mode(entry: ArchiveEntry, target: Path) -> None:
    if entry.mode:
        os.chmod(target, entry.mode)


def process_entry(entry: ArchiveEntry, dest_root: Path, policy: ExtractionPolicy = DEFAULT_POLICY) -> EntryOutcome:
    """Apply the policy checks to one entry and materialize it under `dest_root`."""
    dest_root = Path(dest_root).resolve()
    segments = _path_segments(entry.name)
    if policy.prohibited_directory in segments:
        return EntryOutcome.reject(policy.prohibited_reason)

    entry_point = entry.name.endswith(policy.entry_point_suffix)

    target = resolve_destination(dest_root, entry.name)
    if target is None or (target == dest_root and not entry.is_dir):
        # Escaping entries are not part of the tree, so they cannot be its entry point
        _log.warning("Skipping archive entry outside the extraction root: %r", entry.name)
        return EntryOutcome.proceed()

    try:
        if entry.is_dir:
            target.mkdir(parents=True, exist_ok=True)
            return EntryOutcome.proceed(entry_point)

        target.parent.mkdir(parents=True, exist_ok=True)

        if entry.name.endswith(policy.manifest_filename):
            with entry.open() as source:
                content = source.read()
            reason = check_manifest(content, policy.deny_list)
            if reason is not None:
                return EntryOutcome.reject(reason)
            target.write_bytes(content)
        else:
            _write_stream(entry, target)
        _apply_mode(entry, target)
    except (OSError, zipfile.BadZipFile, tarfile.TarError) as exc:
        return EntryOutcome.fatal(f"failed to extract {entry.name!r}: {exc}")

    return EntryOutcome.proceed(entry_point)


def extract_and_validate(
    archive_path: Union[str, Path],
    destination: Union[str, Path],
    policy: ExtractionPolicy = DEFAULT_POLICY,
) -> ExtractionVerdict:
    """Extract `archive_path` into `destination` while enforcing `policy`.

    Args:
        archive_path: ZIP or tar archive to review
        destination: Extraction root; created if missing

    Returns:
        ExtractionVerdict; rejected verdicts carry the reason

    Raises:
        ArchiveOpenError: if the archive cannot be opened
        ExtractionIOError: if reading an entry or writing the workspace fails
    """
    dest_root = Path(destination)
    try:
        dest_root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExtractionIOError(f"failed to create extraction root {dest_root}: {exc}") from exc
    dest_root = dest_root.resolve()

    entry_point_found = False
    with open_archive(archive_path) as entries:
        _log.debug("Archive %s has %d entries", archive_path, len(entries))
        for entry in entries:
            outcome = process_entry(entry, dest_root, policy)
            if outcome.action is EntryAction.FATAL:
                raise ExtractionIOError(outcome.detail, entry.name)
            if outcome.action is EntryAction.REJECT:
                return ExtractionVerdict(False, outcome.detail, entry_point_found)
            entry_point_found = entry_point_found or outcome.entry_point

    if not entry_point_found:
        return ExtractionVerdict(False, NO_ENTRY_POINT_REASON, False)
    return ExtractionVerdict(True, None, True)
