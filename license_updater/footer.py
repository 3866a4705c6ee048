# Program: License Footer Engine
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Render the license text as a trailing comment block and keep it current."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .styles import CommentStyle

LICENSE_MARKER = "License:"


def format_license(lines: Sequence[str], style: CommentStyle) -> str:
    """Prefix every license line; blank lines become the bare, right-trimmed prefix."""
    blank = style.line_prefix.rstrip()
    return "\n".join(
        blank if not line.strip() else f"{style.line_prefix}{line}" for line in lines
    )


@dataclass(frozen=True)
class LicenseFooter:
    lines: tuple[str, ...]
    style: CommentStyle

    def render(self) -> str:
        return (
            f"\n\n{self.style.block_start}\n"
            f"{self.style.line_prefix}{LICENSE_MARKER}\n"
            f"{format_license(self.lines, self.style)}\n"
            f"{self.style.block_end}"
        )


def find_footer(content: str, style: CommentStyle) -> Optional[tuple[int, int]]:
    """Span of the last opener-led block if it holds the marker and ends the content."""
    opener = f"\n\n{style.block_start}\n"
    start = content.rfind(opener)
    if start == -1:
        return None
    body = content[start + len(opener):].rstrip()
    if not body.endswith(style.block_end):
        return None
    closing = len(body) - len(style.block_end)
    marker = body.find(LICENSE_MARKER, 0, closing)
    if marker == -1 or "\n" not in body[marker + len(LICENSE_MARKER):closing]:
        return None
    return start, len(content)


def apply_footer(content: str, license_lines: Sequence[str], style: CommentStyle) -> str:
    """Replace the existing footer with a freshly rendered one, or append it."""
    footer = LicenseFooter(lines=tuple(license_lines), style=style).render()
    span = find_footer(content, style)
    if span is None:
        return content.rstrip() + footer
    start, _ = span
    return content[:start] + footer


# Created by Dr. Z. Bakhtiyorov
