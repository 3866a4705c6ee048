# Program: Source File Access
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Enumerate source files and read/write them with the skip and failure rules."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .pipeline import SourceFile

SOURCE_EXTENSIONS: tuple[str, ...] = (
    "rs", "py", "js", "jsx", "ts", "tsx", "c", "cpp", "h", "hpp", "java", "go",
    "rb", "php", "swift", "kt", "cs", "sh", "bash", "pl", "pm", "lua", "scala",
    "css", "scss", "html", "xml", "json",
)
MAX_FILE_BYTES = 1_000_000


class SkippableFileError(RuntimeError):
    """Raised for a file that is left alone (too large, not text)."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Skipping {reason}: {path}")
        self.path = path
        self.reason = reason


class FileIOError(RuntimeError):
    """Raised when an in-scope file cannot be read or written."""

    def __init__(self, path: Path, error: OSError) -> None:
        super().__init__(f"{path}: {error.strerror or error}")
        self.path = path
        self.error = error


def is_source_file(path: Path, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> bool:
    ext = path.suffix.lstrip(".").lower()
    return bool(ext) and ext in set(extensions)


def iter_source_files(root: Path, extensions: Iterable[str] = SOURCE_EXTENSIONS) -> Iterator[Path]:
    """Yield source files below ``root`` in a stable, sorted order."""
    allowed = tuple(extensions)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.is_file() and is_source_file(path, allowed):
                yield path


def read_source(path: Path, max_bytes: int = MAX_FILE_BYTES) -> SourceFile:
    try:
        if path.stat().st_size > max_bytes:
            raise SkippableFileError(path, "large file")
        data = path.read_bytes()
    except OSError as exc:
        raise FileIOError(path, exc) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SkippableFileError(path, "binary file") from exc
    return SourceFile(path=path, raw_content=text)


def write_source(path: Path, content: str) -> None:
    try:
        path.write_bytes(content.encode("utf-8"))
    except OSError as exc:
        raise FileIOError(path, exc) from exc


# Created by Dr. Z. Bakhtiyorov
