# Program: License Updater Logging
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Logging under the ``license_updater`` hierarchy.

Environment variables:
    LICENSE_UPDATER_LOG_LEVEL  DEBUG / INFO / WARNING (default) / ERROR
    LICENSE_UPDATER_LOG_FILE   optional path; appends plain-text log lines
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT = "license_updater"

_CONFIGURED = False


def configure(level: Optional[str] = None) -> logging.Logger:
    """One-time init of the root package logger; ``level`` overrides the env var."""
    global _CONFIGURED
    root = logging.getLogger(ROOT)
    level_name = (level or os.environ.get("LICENSE_UPDATER_LOG_LEVEL", "WARNING")).upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))
    if _CONFIGURED:
        return root
    _CONFIGURED = True

    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))

    log_file = os.environ.get("LICENSE_UPDATER_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(fh)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``license_updater`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.
    """
    if not _CONFIGURED:
        configure()
    if name == ROOT or name.startswith(ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT}.{name}")


# Created by Dr. Z. Bakhtiyorov
