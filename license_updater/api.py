# Program: License Updater Orchestrator
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Drive the transform pipeline over a file or a directory tree."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Callable, Iterator, Optional

from .config import AppConfig, ConfigurationError, find_license, read_license
from .events import FileReport, RunSummary
from .files import FileIOError, SkippableFileError, iter_source_files, read_source, write_source
from .log import get_logger
from .pipeline import transform

log = get_logger(__name__)

ReportCallback = Callable[[FileReport], None]


def unified_diff(path: Path, before: str, after: str) -> str:
    return "\n".join(
        difflib.unified_diff(
            before.splitlines(),
            after.splitlines(),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
            lineterm="",
        )
    )


class LicenseUpdater:
    """Apply the header/footer transform to files and report each outcome."""

    def __init__(
        self,
        cfg: AppConfig,
        license_text: str,
        on_report: Optional[ReportCallback] = None,
        with_diff: bool = False,
    ) -> None:
        if not cfg.author:
            raise ConfigurationError("An author is required")
        self.cfg = cfg
        self.author = cfg.author
        self.license_lines = tuple(license_text.splitlines())
        self.on_report = on_report
        self.with_diff = with_diff

    @classmethod
    def for_path(
        cls,
        cfg: AppConfig,
        target: Path,
        on_report: Optional[ReportCallback] = None,
        with_diff: bool = False,
    ) -> "LicenseUpdater":
        """Build an updater, reading ``cfg.license_path`` or discovering one above ``target``."""
        if cfg.license_path is not None:
            license_path = cfg.license_path
        else:
            license_path = find_license(target, cfg.license_names, cfg.max_license_depth)
        log.debug("Using license %s", license_path)
        return cls(cfg, read_license(license_path), on_report=on_report, with_diff=with_diff)

    def process_file(self, path: Path, dry_run: bool = False) -> FileReport:
        """Transform one file; raises :class:`FileIOError` on read/write failure."""
        try:
            source = read_source(path, self.cfg.max_bytes)
        except SkippableFileError as exc:
            log.debug("%s", exc)
            return FileReport(path=str(path), action="skip", message=str(exc))

        result = transform(source, self.author, self.license_lines, self.cfg.current_year)
        if dry_run:
            diff = None
            if self.with_diff and result.changed:
                diff = unified_diff(path, source.raw_content, result.content)
            return FileReport(path=str(path), action="dry-run", changed=result.changed, diff=diff)

        if result.changed:
            write_source(path, result.content)
            log.debug("Wrote %s", path)
        return FileReport(path=str(path), action="write", changed=result.changed)

    def iter_targets(self, target: Path) -> Iterator[Path]:
        if target.is_file():
            yield target
        elif target.is_dir():
            yield from iter_source_files(target, self.cfg.extensions)
        else:
            raise ConfigurationError(f"Path does not exist or is not accessible: {target}")

    def run(self, target: Path, dry_run: bool = False) -> RunSummary:
        """Process ``target``; the first I/O failure stops the run unless ``fail_fast`` is off."""
        summary = RunSummary(dry_run=dry_run)
        for path in self.iter_targets(target):
            try:
                report = self.process_file(path, dry_run=dry_run)
            except FileIOError as exc:
                if self.cfg.fail_fast:
                    raise
                log.warning("I/O failure, continuing: %s", exc)
                report = FileReport(path=str(path), action="error", message=str(exc))
            summary.reports.append(report)
            if self.on_report is not None:
                self.on_report(report)
        return summary


# Created by Dr. Z. Bakhtiyorov
