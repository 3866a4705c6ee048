# Program: License Updater Config Utilities
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Configuration loading and license-file discovery."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from .files import MAX_FILE_BYTES, SOURCE_EXTENSIONS

LICENSE_NAMES: tuple[str, ...] = ("LICENSE", "LICENSE.md", "LICENSE.txt")
MAX_LICENSE_DEPTH = 100


class ConfigurationError(RuntimeError):
    """Raised when the run cannot start (bad config, missing license, bad path)."""


@dataclass
class AppConfig:
    author: Optional[str] = None
    license_path: Optional[Path] = None
    extensions: tuple[str, ...] = SOURCE_EXTENSIONS
    max_bytes: int = MAX_FILE_BYTES
    license_names: tuple[str, ...] = LICENSE_NAMES
    max_license_depth: int = MAX_LICENSE_DEPTH
    fail_fast: bool = True
    year: Optional[int] = None

    @property
    def current_year(self) -> int:
        return self.year if self.year is not None else datetime.now(timezone.utc).year


def _str_tuple(value: Any, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        value = [value]
    return tuple(str(item) for item in value)


def load_config(path: Path) -> AppConfig:
    """Load YAML config with sane defaults."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Cannot read config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {path} must be a mapping")

    license_path = data.get("license")
    year = data.get("year")
    return AppConfig(
        author=data.get("author"),
        license_path=(path.parent / license_path).resolve() if license_path else None,
        extensions=tuple(
            ext.lstrip(".").lower() for ext in _str_tuple(data.get("extensions"), SOURCE_EXTENSIONS)
        ),
        max_bytes=int(data.get("max_bytes", MAX_FILE_BYTES)),
        license_names=_str_tuple(data.get("license_names"), LICENSE_NAMES),
        max_license_depth=int(data.get("max_license_depth", MAX_LICENSE_DEPTH)),
        fail_fast=bool(data.get("fail_fast", True)),
        year=int(year) if year is not None else None,
    )


def find_license(
    start: Path,
    names: tuple[str, ...] = LICENSE_NAMES,
    max_depth: int = MAX_LICENSE_DEPTH,
) -> Path:
    """Search ``start`` (or its parent, for a file) and its ancestors for a license file."""
    current = start.parent if start.is_file() else start
    current = current.resolve()
    for _ in range(max_depth):
        for name in names:
            candidate = current / name
            if candidate.exists():
                return candidate
        if current.parent == current:
            break
        current = current.parent
    raise ConfigurationError("License file not found")


def read_license(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read license {path}: {exc}") from exc


# Created by Dr. Z. Bakhtiyorov
