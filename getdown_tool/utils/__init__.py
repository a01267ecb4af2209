# getdown_tool/utils/__init__.py
"""Utility functions for getdown-tool"""

from .file_utils import (
    ensure_directory,
    copy_file_to_dir,
    atomic_write,
)
from .log_utils import verbose_log
from .path_utils import normalize_sub_path

__all__ = [
    # File utilities
    "ensure_directory",
    "copy_file_to_dir",
    "atomic_write",

    # Logging
    "verbose_log",

    # Path utilities
    "normalize_sub_path",
]
