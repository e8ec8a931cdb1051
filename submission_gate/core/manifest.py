"""Dependency manifest (package.json) policy checks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional


@dataclass(frozen=True)
class DependencyManifest:
    """Declared runtime and development dependencies of a submission."""

    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)


def _dependency_group(payload: dict, key: str) -> Dict[str, str]:
    group = payload.get(key)
    if not isinstance(group, dict):
        return {}
    return {str(name): str(version) for name, version in group.items()}


def parse_manifest(content: bytes) -> Optional[DependencyManifest]:
    """Parse raw manifest bytes, returning None when they are not usable JSON.

    Students regularly ship broken package.json files; that is not this
    tool's concern, so callers treat None as "nothing to check".
    """
    try:
        payload = json.loads(content.decode("utf-8-sig"))
    except (UnicodeDecodeError, ValueError):
        return None
    if not isinstance(payload, dict):
        return None
    return DependencyManifest(
        dependencies=_dependency_group(payload, "dependencies"),
        dev_dependencies=_dependency_group(payload, "devDependencies"),
    )


def find_denied_dependency(manifest: DependencyManifest, deny_list: Iterable[str]) -> Optional[str]:
    """Return the first deny-listed package declared by `manifest`.

    Deny-list order wins; within one name, `dependencies` is checked before
    `devDependencies`. Only exact key matches count.
    """
    for name in deny_list:
        if name in manifest.dependencies:
            return name
        if name in manifest.dev_dependencies:
            return name
    return None


def check_manifest(content: bytes, deny_list: Iterable[str]) -> Optional[str]:
    """Check manifest bytes against `deny_list`.

    Returns a human readable rejection reason, or None when the manifest is
    acceptable or could not be parsed.
    """
    manifest = parse_manifest(content)
    if manifest is None:
        return None
    denied = find_denied_dependency(manifest, deny_list)
    if denied is None:
        return None
    return f"usage of prohibited framework detected: {denied}"
