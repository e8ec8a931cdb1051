"""Hand-off to the external Playwright end-to-end runner."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from ..common.logging_config import get_logger


def build_runner_command(node_bin: str, runner_script: Union[str, Path], submission_type: str, project_dir: Union[str, Path]) -> List[str]:
    return [node_bin, str(Path(runner_script).resolve()), submission_type, str(project_dir)]


def run_e2e_runner(
    submission_type: str,
    project_dir: Union[str, Path],
    *,
    runner_script: Union[str, Path],
    node_bin: str = "node",
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Run the E2E runner against `project_dir`, streaming its output.

    The runner's exit status is advisory: a failure only means a human has to
    look at the submission, so it is logged and reported as False.
    """
    logger = logger or get_logger(__name__)
    command = build_runner_command(node_bin, runner_script, submission_type, project_dir)
    logger.debug("Runner command: %s", command)
    try:
        result = subprocess.run(command, check=False)
    except OSError as exc:
        logger.warning("Could not launch the E2E runner (%s): %s", command[0], exc)
        return False

    if result.returncode != 0:
        logger.warning("E2E runner exited with code %d. Manual review required.", result.returncode)
        return False
    return True
