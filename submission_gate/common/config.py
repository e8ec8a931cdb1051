"""Configuration for Submission Gate.

Settings come from the environment; the CLI overrides individual fields
from its flags via :meth:`ReviewSettings.with_overrides`.

Environment variables:
    - `SUBMISSION_GATE_WATCH_DIR`
    - `SUBMISSION_GATE_RUNNER_SCRIPT`
    - `SUBMISSION_GATE_NODE_BIN`
    - `SUBMISSION_GATE_TMPDIR`
    - `SUBMISSION_GATE_SKIP_RUNNER`
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEFAULT_NODE_BIN, DEFAULT_RUNNER_SCRIPT, DEFAULT_WATCH_DIR


def env_bool(environ: Mapping[str, str], key: str, default: bool = False) -> bool:
    value = environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ReviewSettings:
    """Typed review settings sourced from the environment."""

    watch_dir: str
    runner_script: str
    node_bin: str
    temp_parent: Optional[str] = None
    skip_runner: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReviewSettings":
        environ = os.environ if environ is None else environ
        return cls(
            watch_dir=os.path.expanduser(environ.get("SUBMISSION_GATE_WATCH_DIR") or DEFAULT_WATCH_DIR),
            runner_script=environ.get("SUBMISSION_GATE_RUNNER_SCRIPT") or DEFAULT_RUNNER_SCRIPT,
            node_bin=environ.get("SUBMISSION_GATE_NODE_BIN") or DEFAULT_NODE_BIN,
            temp_parent=environ.get("SUBMISSION_GATE_TMPDIR") or None,
            skip_runner=env_bool(environ, "SUBMISSION_GATE_SKIP_RUNNER", False),
        )

    def with_overrides(self, **overrides) -> "ReviewSettings":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "watch_dir" in changes:
            changes["watch_dir"] = os.path.expanduser(changes["watch_dir"])
        return dataclasses.replace(self, **changes)
