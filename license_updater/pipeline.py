# Program: File Transform Pipeline
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Header then footer over one file's text. Pure: no I/O, no shared state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .footer import apply_footer
from .header import apply_header
from .styles import resolve_style


@dataclass(frozen=True)
class SourceFile:
    path: Path
    raw_content: str

    @property
    def extension(self) -> str:
        return self.path.suffix.lstrip(".").lower()


@dataclass(frozen=True)
class TransformResult:
    content: str
    changed: bool


def transform(
    source: SourceFile,
    author: str,
    license_lines: Sequence[str],
    current_year: int,
) -> TransformResult:
    style = resolve_style(source.extension)
    after_header = apply_header(source.raw_content, author, style, current_year)
    final = apply_footer(after_header, license_lines, style)
    return TransformResult(content=final, changed=final != source.raw_content)


# Created by Dr. Z. Bakhtiyorov
