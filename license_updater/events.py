# Program: License Updater Report Models
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Pydantic models for per-file outcomes and the run summary."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Action = Literal["write", "dry-run", "skip", "error"]


class FileReport(BaseModel):
    path: str
    action: Action
    changed: bool = False
    message: Optional[str] = None
    diff: Optional[str] = None

    def lines(self) -> List[str]:
        """Console lines describing this outcome."""
        if self.action == "dry-run":
            detail = "  Changes would be made." if self.changed else "  No changes needed."
            return [f"Would update: {self.path}", detail]
        if self.action == "write":
            return [f"Updated: {self.path}" if self.changed else f"No changes needed: {self.path}"]
        if self.action == "skip":
            return [self.message or f"Skipping: {self.path}"]
        return [f"Failed: {self.message or self.path}"]


class RunSummary(BaseModel):
    dry_run: bool = False
    reports: List[FileReport] = Field(default_factory=list)

    def count(self, action: Action, changed: Optional[bool] = None) -> int:
        return sum(
            1
            for report in self.reports
            if report.action == action and (changed is None or report.changed == changed)
        )

    @property
    def changed(self) -> int:
        return sum(1 for report in self.reports if report.changed)

    @property
    def unchanged(self) -> int:
        return self.count("write", changed=False) + self.count("dry-run", changed=False)

    @property
    def skipped(self) -> int:
        return self.count("skip")

    @property
    def failed(self) -> int:
        return self.count("error")

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def describe(self) -> str:
        verb = "would change" if self.dry_run else "changed"
        return (
            f"{len(self.reports)} file(s): {self.changed} {verb}, {self.unchanged} unchanged, "
            f"{self.skipped} skipped, {self.failed} failed"
        )


# Created by Dr. Z. Bakhtiyorov
