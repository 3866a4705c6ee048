# Program: Copyright Header Engine
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Detect, update, or insert the one-line copyright notice at the top of a file.

Detection is scoped to the current author and comment style. A notice written
for another author, or rendered with another file type's markers, is not
recognized; a fresh notice is then inserted above it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

from .styles import CommentStyle


@dataclass(frozen=True)
class CopyrightNotice:
    """A detected notice and the span of ``content`` it occupies."""

    start_year: int
    end_year: Optional[int]
    author: str
    span: tuple[int, int] = (0, 0)

    @property
    def last_year(self) -> int:
        return self.end_year if self.end_year is not None else self.start_year

    @property
    def years(self) -> str:
        if self.end_year is None:
            return str(self.start_year)
        return f"{self.start_year}-{self.end_year}"


def notice_pattern(author: str, style: CommentStyle) -> re.Pattern[str]:
    return re.compile(
        r"\A"
        + re.escape(style.block_start)
        + r"[ \t]*Copyright \(c\) (\d{4})(?:-(\d{4}))? "
        + re.escape(author)
        + r"[ \t]*.*?[ \t]*"
        + re.escape(style.block_end.strip())
    )


def render_notice(years: str, author: str, style: CommentStyle) -> str:
    return " ".join(
        (style.block_start, "Copyright (c)", years, author, style.block_end.strip())
    )


def find_notice(content: str, author: str, style: CommentStyle) -> Optional[CopyrightNotice]:
    match = notice_pattern(author, style).search(content)
    if match is None:
        return None
    end_year = match.group(2)
    return CopyrightNotice(
        start_year=int(match.group(1)),
        end_year=int(end_year) if end_year is not None else None,
        author=author,
        span=match.span(),
    )


def apply_header(content: str, author: str, style: CommentStyle, current_year: int) -> str:
    """Return ``content`` with its copyright notice brought up to ``current_year``.

    Args:
        content: Full text of the file.
        author: Exact author string to match and to write.
        style: Comment markers of the file.
        current_year: Year the notice must end in.

    Returns:
        The updated text. Everything outside the notice is kept verbatim.
    """
    notice = find_notice(content, author, style)
    if notice is None:
        return f"{render_notice(str(current_year), author, style)}\n\n{content}"

    if notice.last_year == current_year or notice.start_year > current_year:
        return content

    bumped = replace(notice, end_year=current_year)
    replacement = render_notice(bumped.years, author, style)
    start, end = notice.span
    return content[:start] + replacement + content[end:]


# Created by Dr. Z. Bakhtiyorov
