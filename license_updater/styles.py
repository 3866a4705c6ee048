# Program: Comment Style Table
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Map file extensions to the comment markers used for headers and footers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommentStyle:
    """Block-open marker, per-line prefix, and block-close marker."""

    block_start: str
    line_prefix: str
    block_end: str


C_STYLE = CommentStyle("/*", " * ", " */")
HASH_STYLE = CommentStyle("#", "# ", "#")
LUA_STYLE = CommentStyle("--[[", "-- ", "--]]")
MARKUP_STYLE = CommentStyle("<!--", " ", "-->")

_GROUPS: dict[CommentStyle, tuple[str, ...]] = {
    C_STYLE: (
        "rs", "c", "cpp", "h", "hpp", "js", "jsx", "ts", "tsx", "go",
        "java", "swift", "kt", "scala", "css", "scss", "cs",
    ),
    HASH_STYLE: ("py", "rb", "sh", "bash", "pl", "pm", "php"),
    LUA_STYLE: ("lua",),
    MARKUP_STYLE: ("html", "xml"),
}

STYLES: dict[str, CommentStyle] = {
    ext: style for style, extensions in _GROUPS.items() for ext in extensions
}


def resolve_style(extension: str) -> CommentStyle:
    """Return the comment style for ``extension`` (with or without the dot).

    An empty extension means the file has none and gets the hash style;
    anything unknown falls back to C-style blocks.
    """
    ext = extension.lstrip(".").lower()
    if not ext:
        return HASH_STYLE
    return STYLES.get(ext, C_STYLE)


def style_for_path(path: Path) -> CommentStyle:
    return resolve_style(path.suffix)


# Created by Dr. Z. Bakhtiyorov
