# Program: License Updater Integration Tests
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Validate that the updater reads, transforms, and writes trees of files."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from license_updater import files
from license_updater.api import LicenseUpdater
from license_updater.config import AppConfig, ConfigurationError
from license_updater.events import FileReport
from license_updater.files import FileIOError

LICENSE_TEXT = "MIT License\n\nPermission granted.\n"


@pytest.fixture()
def tree(tmp_path: Path) -> Path:
    (tmp_path / "LICENSE").write_text(LICENSE_TEXT, encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.rs").write_text("fn main() {}\n", encoding="utf-8")
    (tmp_path / "src" / "tool.py").write_text("print('x')\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("# readme\n", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def updater(tree: Path) -> LicenseUpdater:
    cfg = AppConfig(author="Jane Doe", year=2025)
    return LicenseUpdater.for_path(cfg, tree)


def test_run_updates_source_files_only(updater: LicenseUpdater, tree: Path) -> None:
    summary = updater.run(tree)
    assert [Path(r.path).name for r in summary.reports] == ["main.rs", "tool.py"]
    assert all(r.action == "write" and r.changed for r in summary.reports)
    assert (tree / "src" / "tool.py").read_text(encoding="utf-8").startswith("# Copyright (c) 2025 Jane Doe #\n\n")
    assert (tree / "src" / "main.rs").read_text(encoding="utf-8").endswith(" * Permission granted.\n */")
    assert (tree / "README.md").read_text(encoding="utf-8") == "# readme\n"


def test_second_run_reports_no_changes(updater: LicenseUpdater, tree: Path) -> None:
    updater.run(tree)
    before = (tree / "src" / "main.rs").read_bytes()
    summary = updater.run(tree)
    assert summary.changed == 0
    assert summary.unchanged == 2
    assert (tree / "src" / "main.rs").read_bytes() == before


def test_dry_run_writes_nothing(tree: Path) -> None:
    cfg = AppConfig(author="Jane Doe", year=2025)
    updater = LicenseUpdater.for_path(cfg, tree, with_diff=True)
    summary = updater.run(tree, dry_run=True)
    assert summary.dry_run
    assert all(r.action == "dry-run" and r.changed for r in summary.reports)
    assert "+# Copyright (c) 2025 Jane Doe #" in (summary.reports[1].diff or "")
    assert (tree / "src" / "tool.py").read_text(encoding="utf-8") == "print('x')\n"


def test_single_file_ignores_extension_filter(updater: LicenseUpdater, tree: Path) -> None:
    report = updater.process_file(tree / "README.md")
    assert report.action == "write" and report.changed
    assert (tree / "README.md").read_text(encoding="utf-8").startswith("/* Copyright (c) 2025 Jane Doe */")


def test_skips_are_reported(tree: Path) -> None:
    (tree / "src" / "blob.c").write_bytes(b"\xff\xfe\x00")
    cfg = AppConfig(author="Jane Doe", year=2025, max_bytes=1_000)
    (tree / "src" / "huge.js").write_text("x" * 2_000, encoding="utf-8")
    seen: list[FileReport] = []
    summary = LicenseUpdater.for_path(cfg, tree, on_report=seen.append).run(tree)
    assert seen == summary.reports
    skipped = {Path(r.path).name: r.message for r in summary.reports if r.action == "skip"}
    assert skipped["blob.c"].startswith("Skipping binary file:")
    assert skipped["huge.js"].startswith("Skipping large file:")
    assert summary.skipped == 2


def test_explicit_license_path(tree: Path) -> None:
    other = tree / "OTHER.txt"
    other.write_text("Custom terms\n", encoding="utf-8")
    cfg = AppConfig(author="Jane Doe", year=2025, license_path=other)
    LicenseUpdater.for_path(cfg, tree).run(tree)
    assert (tree / "src" / "tool.py").read_text(encoding="utf-8").endswith("# License:\n# Custom terms\n#")


def test_license_text_split_into_lines() -> None:
    updater = LicenseUpdater(AppConfig(author="Jane Doe"), "MIT License\r\n\r\nPermission granted.\n")
    assert updater.license_lines == ("MIT License", "", "Permission granted.")


def test_missing_author_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        LicenseUpdater(AppConfig(), LICENSE_TEXT)


def test_missing_target_is_configuration_error(updater: LicenseUpdater, tree: Path) -> None:
    with pytest.raises(ConfigurationError):
        updater.run(tree / "does-not-exist")


def _failing_write(path: Path, content: str) -> None:
    raise FileIOError(path, PermissionError(13, "Permission denied"))


def test_io_failure_stops_run_by_default(updater: LicenseUpdater, tree: Path, monkeypatch) -> None:
    monkeypatch.setattr("license_updater.api.write_source", _failing_write)
    seen: list[FileReport] = []
    updater.on_report = seen.append
    with pytest.raises(FileIOError):
        updater.run(tree)
    assert seen == []
    assert files.read_source(tree / "src" / "tool.py").raw_content == "print('x')\n"


def test_keep_going_collects_failures(tree: Path, monkeypatch) -> None:
    monkeypatch.setattr("license_updater.api.write_source", _failing_write)
    cfg = AppConfig(author="Jane Doe", year=2025, fail_fast=False)
    summary = LicenseUpdater.for_path(cfg, tree).run(tree)
    assert summary.failed == 2
    assert not summary.ok
    assert "Permission denied" in (summary.reports[0].message or "")


# Created by Dr. Z. Bakhtiyorov
