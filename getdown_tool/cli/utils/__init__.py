"""CLI utilities"""

from .output import (
    console,
    format_build_result,
    format_staged_files,
    print_success,
    print_error,
)

__all__ = [
    "console",
    "format_build_result",
    "format_staged_files",
    "print_success",
    "print_error",
]
