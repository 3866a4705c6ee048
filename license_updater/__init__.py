# Program: License Updater Package Init
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2026
# License: MIT License

"""Keep copyright headers and license footers current across a source tree."""

from .api import LicenseUpdater
from .config import AppConfig, ConfigurationError, find_license, load_config, read_license
from .events import FileReport, RunSummary
from .files import FileIOError, SkippableFileError
from .footer import LicenseFooter, apply_footer, format_license
from .header import CopyrightNotice, apply_header, find_notice
from .pipeline import SourceFile, TransformResult, transform
from .styles import CommentStyle, resolve_style

__all__ = [
    "AppConfig",
    "CommentStyle",
    "ConfigurationError",
    "CopyrightNotice",
    "FileIOError",
    "FileReport",
    "LicenseFooter",
    "LicenseUpdater",
    "RunSummary",
    "SkippableFileError",
    "SourceFile",
    "TransformResult",
    "apply_footer",
    "apply_header",
    "find_license",
    "find_notice",
    "format_license",
    "load_config",
    "read_license",
    "resolve_style",
    "transform",
]


# Created by Dr. Z. Bakhtiyorov
