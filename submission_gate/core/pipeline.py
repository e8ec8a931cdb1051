"""Review orchestration: extract and validate, resolve the root, run E2E tests."""

from __future__ import annotations

import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..common.config import ReviewSettings
from ..common.constants import WORKSPACE_PREFIX
from ..common.errors import SetupError
from ..common.logging_config import get_logger
from .discovery import find_latest_archive
from .extractor import DEFAULT_POLICY, ExtractionPolicy, extract_and_validate
from .resolver import resolve_project_root
from .runner import run_e2e_runner


class ReviewStatus:
    """Final status of a review run."""
    REJECTED = "rejected"
    PASSED = "passed"
    NEEDS_REVIEW = "needs_review"


@dataclass(frozen=True)
class ReviewResult:
    status: str
    archive_path: Path
    reason: Optional[str] = None
    project_subpath: Optional[str] = None
    runner_invoked: bool = False

    @property
    def rejected(self) -> bool:
        return self.status == ReviewStatus.REJECTED


class ReviewPipeline:
    """Runs one submission through the static gate and the E2E hand-off."""

    def __init__(self, settings: Optional[ReviewSettings] = None, policy: ExtractionPolicy = DEFAULT_POLICY):
        self.settings = settings or ReviewSettings.from_env()
        self.policy = policy
        self._log = get_logger(__name__)

    def locate_archive(self, archive_path: Optional[Union[str, Path]] = None) -> Path:
        if archive_path:
            return Path(archive_path)
        self._log.info("No archive path provided. Searching %s for the newest submission...", self.settings.watch_dir)
        return find_latest_archive(self.settings.watch_dir)

    def _acquire_workspace(self) -> Path:
        try:
            return Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=self.settings.temp_parent)).resolve()
        except OSError as exc:
            raise SetupError(f"failed to create temp directory: {exc}") from exc

    def _release_workspace(self, workspace: Path) -> None:
        shutil.rmtree(workspace, ignore_errors=True)
        if workspace.exists():
            self._log.warning("Could not fully remove workspace %s", workspace)

    def run(self, submission_type: str, archive_path: Optional[Union[str, Path]] = None, run_runner: Optional[bool] = None) -> ReviewResult:
        """Review one archive.

        Args:
            submission_type: Opaque tag forwarded to the E2E runner (e.g. ``sub1``)
            archive_path: Archive to review; auto-discovered when omitted
            run_runner: Override for ``settings.skip_runner``

        Returns:
            ReviewResult describing rejection, success or the need for manual review

        Raises:
            SetupError: if the archive or workspace is unavailable
            ExtractionIOError: if extraction fails for reasons unrelated to policy
        """
        if run_runner is None:
            run_runner = not self.settings.skip_runner
        archive = self.locate_archive(archive_path)
        self._log.info("Starting static analysis for %s: %s", submission_type.upper(), archive)

        workspace = self._acquire_workspace()
        try:
            verdict = extract_and_validate(archive, workspace, self.policy)
            if verdict.rejected:
                self._log.warning("Static validation failed: %s", verdict.reason)
                return ReviewResult(ReviewStatus.REJECTED, archive, reason=verdict.reason)

            self._log.info(
                "Static validation successful. No prohibited frameworks or '%s' detected.",
                self.policy.prohibited_directory,
            )
            project_dir = resolve_project_root(workspace)
            if project_dir != workspace:
                self._log.info("Nested directory structure detected. Adjusting root to: %s", project_dir.name)
            subpath = project_dir.relative_to(workspace).as_posix()

            if not run_runner:
                return ReviewResult(ReviewStatus.PASSED, archive, project_subpath=subpath)

            self._log.info("Handing over to the E2E runner...")
            runner_ok = run_e2e_runner(
                submission_type,
                project_dir,
                runner_script=self.settings.runner_script,
                node_bin=self.settings.node_bin,
                logger=self._log,
            )
            status = ReviewStatus.PASSED if runner_ok else ReviewStatus.NEEDS_REVIEW
            return ReviewResult(status, archive, project_subpath=subpath, runner_invoked=True)
        finally:
            self._release_workspace(workspace)
