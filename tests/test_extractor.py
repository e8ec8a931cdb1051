from __future__ import annotations

import json
import stat
import zipfile
from pathlib import Path

import pytest

from submission_gate.common.errors import ArchiveOpenError, ExtractionIOError
from submission_gate.core.extractor import (
    NO_ENTRY_POINT_REASON,
    EntryAction,
    ExtractionPolicy,
    extract_and_validate,
    process_entry,
)
from submission_gate.core.archive import ArchiveEntry
from submission_gate.core.resolver import resolve_project_root

INDEX = "<!doctype html><title>Notes</title>"


def test_react_manifest_is_rejected(make_zip, tmp_path):
    archive = make_zip({
        "index.html": INDEX,
        "package.json": json.dumps({"dependencies": {"react": "^18"}}),
    })

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.rejected
    assert "react" in verdict.reason
    assert not (tmp_path / "out" / "package.json").exists()


def test_node_modules_is_rejected_even_after_valid_entries(make_zip, tmp_path):
    archive = make_zip({
        "project/src/index.html": INDEX,
        "project/package.json": json.dumps({"dependencies": {"lodash": "^4"}}),
        "project/node_modules/x/file.js": "module.exports = 1;",
        "project/after.txt": "never extracted",
    })

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.rejected
    assert "node_modules" in verdict.reason
    assert verdict.entry_point_found
    assert not (tmp_path / "out" / "project" / "node_modules").exists()
    assert not (tmp_path / "out" / "project" / "after.txt").exists()


def test_node_modules_directory_entry_is_rejected(make_zip, tmp_path):
    archive = make_zip({"index.html": INDEX, "node_modules": None})
    verdict = extract_and_validate(archive, tmp_path / "out")
    assert verdict.rejected


def test_node_modules_as_name_fragment_is_allowed(make_zip, tmp_path):
    archive = make_zip({"index.html": INDEX, "docs/node_modules_notes.md": "why we do not vendor"})
    verdict = extract_and_validate(archive, tmp_path / "out")
    assert verdict.accepted


def test_missing_entry_point_is_rejected(make_zip, tmp_path):
    archive = make_zip({"project/main.js": "console.log(1);", "project/package.json": "{}"})

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.rejected
    assert verdict.reason == NO_ENTRY_POINT_REASON
    assert not verdict.entry_point_found


def test_nested_entry_point_without_manifest_is_accepted(make_zip, tmp_path):
    archive = make_zip({"submission-v2/app/index.html": INDEX, "submission-v2/app/style.css": "body {}"})

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.accepted
    assert verdict.entry_point_found
    assert (tmp_path / "out" / "submission-v2" / "app" / "index.html").read_text() == INDEX


def test_traversal_entry_is_skipped(make_zip, tmp_path):
    destination = tmp_path / "a" / "b" / "out"
    archive = make_zip({
        "../../etc/passwd": "root:x:0:0",
        "index.html": INDEX,
    })

    verdict = extract_and_validate(archive, destination)

    assert verdict.accepted
    assert not (tmp_path / "a" / "etc" / "passwd").exists()
    assert (destination / "index.html").exists()


def test_skipped_traversal_entry_does_not_count_as_entry_point(make_zip, tmp_path):
    archive = make_zip({"../evil.html": INDEX, "main.js": "1"})

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.rejected
    assert verdict.reason == NO_ENTRY_POINT_REASON
    assert not (tmp_path / "evil.html").exists()


def test_absolute_entry_is_extracted_under_root(make_zip, tmp_path):
    archive = make_zip({"/tmp/submission-gate-absolute.txt": "notes", "index.html": INDEX})

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.accepted
    assert (tmp_path / "out" / "tmp" / "submission-gate-absolute.txt").read_text() == "notes"
    assert not Path("/tmp/submission-gate-absolute.txt").exists()


def test_leading_slash_react_manifest_is_rejected(make_zip, tmp_path):
    archive = make_zip({
        "/index.html": INDEX,
        "/package.json": json.dumps({"dependencies": {"react": "^18"}}),
    })

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.rejected
    assert "react" in verdict.reason
    assert (tmp_path / "out" / "index.html").exists()


def test_leading_slash_nested_entry_point_is_accepted(make_zip, tmp_path):
    archive = make_zip({"/submission-v2/app/index.html": INDEX})

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.accepted
    assert verdict.entry_point_found
    assert resolve_project_root(tmp_path / "out") == tmp_path / "out" / "submission-v2" / "app"


def test_leading_slash_html_counts_as_entry_point(make_zip, tmp_path):
    archive = make_zip({"/main.js": "1", "/pages/about.html": INDEX})

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.accepted
    assert (tmp_path / "out" / "pages" / "about.html").exists()


def test_suffixed_manifest_name_is_checked(make_zip, tmp_path):
    archive = make_zip({
        "index.html": INDEX,
        "app/my-package.json": json.dumps({"dependencies": {"react": "1"}}),
    })

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.rejected
    assert "react" in verdict.reason
    assert not (tmp_path / "out" / "app" / "my-package.json").exists()


def test_invalid_manifest_is_extracted_and_ignored(make_zip, tmp_path):
    archive = make_zip({"index.html": INDEX, "package.json": '{"dependencies": {"react": '})

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.accepted
    assert (tmp_path / "out" / "package.json").read_text() == '{"dependencies": {"react": '


def test_manifest_content_is_preserved(make_zip, tmp_path):
    manifest = json.dumps({"name": "notes", "devDependencies": {"webpack": "^5"}})
    archive = make_zip({"app/index.html": INDEX, "app/package.json": manifest})

    extract_and_validate(archive, tmp_path / "out")

    assert (tmp_path / "out" / "app" / "package.json").read_text() == manifest


def test_custom_policy_deny_list(make_zip, tmp_path):
    archive = make_zip({"index.html": INDEX, "package.json": json.dumps({"dependencies": {"jquery": "3"}})})

    verdict = extract_and_validate(archive, tmp_path / "out", ExtractionPolicy(deny_list=("jquery",)))

    assert verdict.rejected
    assert "jquery" in verdict.reason


def test_permission_bits_are_applied(tmp_path):
    archive = tmp_path / "modes.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        info = zipfile.ZipInfo("run.sh")
        info.external_attr = (stat.S_IFREG | 0o755) << 16
        zf.writestr(info, "#!/bin/sh\n")
        zf.writestr(zipfile.ZipInfo("index.html"), INDEX)

    extract_and_validate(archive, tmp_path / "out")

    assert stat.S_IMODE((tmp_path / "out" / "run.sh").stat().st_mode) == 0o755


def test_tar_archives_are_supported(make_tar, tmp_path):
    archive = make_tar({
        "wrapper": None,
        "wrapper/index.html": INDEX,
        "wrapper/package.json": json.dumps({"devDependencies": {"vue": "3"}}),
    })

    verdict = extract_and_validate(archive, tmp_path / "out")

    assert verdict.rejected
    assert "vue" in verdict.reason


def test_tar_node_modules_directory_is_rejected(make_tar, tmp_path):
    archive = make_tar({"index.html": INDEX, "node_modules": None})
    assert extract_and_validate(archive, tmp_path / "out").rejected


def test_missing_archive_raises_open_error(tmp_path):
    with pytest.raises(ArchiveOpenError):
        extract_and_validate(tmp_path / "missing.zip", tmp_path / "out")


def test_non_archive_raises_open_error(tmp_path):
    bogus = tmp_path / "bogus.zip"
    bogus.write_text("not a zip")
    with pytest.raises(ArchiveOpenError):
        extract_and_validate(bogus, tmp_path / "out")


def test_write_failure_is_an_io_error_not_a_rejection(make_zip, tmp_path):
    archive = make_zip({"project/app": "plain file", "project/app/index.html": INDEX})

    with pytest.raises(ExtractionIOError) as excinfo:
        extract_and_validate(archive, tmp_path / "out")

    assert excinfo.value.entry_name == "project/app/index.html"


def test_process_entry_rejects_before_opening(tmp_path):
    def _fail():
        raise AssertionError("entry content must not be read")

    entry = ArchiveEntry(name="x/node_modules/pkg/index.js", is_dir=False, size=1, mode=0, opener=_fail)

    outcome = process_entry(entry, tmp_path)

    assert outcome.action is EntryAction.REJECT
    assert not (tmp_path / "x").exists()
