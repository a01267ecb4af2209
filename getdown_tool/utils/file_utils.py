# getdown_tool/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Union


def ensure_directory(directory: Path) -> Path:
    """
    Ensure a directory exists

    Args:
        directory: Directory path

    Returns:
        The directory path
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def copy_file_to_dir(src: Path, directory: Path, name: str = None) -> Path:
    """
    Copy a file into a directory, overwriting an existing copy

    Args:
        src: Source file
        directory: Destination directory (created if missing)
        name: Destination file name (defaults to the source name)

    Returns:
        Path to the copied file

    Raises:
        OSError: If the directory cannot be created or the copy fails
    """
    src = Path(src)
    ensure_directory(directory)
    dst = Path(directory) / (name or src.name)

    # Already in place, nothing to copy
    if dst.exists() and os.path.samefile(src, dst):
        return dst

    shutil.copy2(src, dst)
    return dst


def atomic_write(file_path: Path,
                 content: Union[str, bytes],
                 mode: str = 'w',
                 encoding: str = None) -> None:
    """
    Write file atomically

    Args:
        file_path: Target file path
        content: Content to write
        mode: Write mode
        encoding: Text encoding for text modes
    """
    file_path = Path(file_path)
    ensure_directory(file_path.parent)

    # Write to temporary file first
    temp_fd, temp_path = tempfile.mkstemp(dir=file_path.parent)

    try:
        with os.fdopen(temp_fd, mode, encoding=encoding if 'b' not in mode else None) as f:
            f.write(content)

        # Atomic rename
        os.replace(temp_path, file_path)

    except Exception:
        # Clean up temp file on error
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
