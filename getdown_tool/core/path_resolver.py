"""Path resolution module for getdown-tool"""

import os
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import NoCommonDirectoryError
from ..constants import DEFAULT_DESCRIPTOR_FILE, DEFAULT_WORK_DIR
from ..models.config import StagingConfig


def _is_under(base: str, target: str, segment_aware: bool) -> bool:
    if segment_aware:
        return target == base or target.startswith(base + os.sep)
    return target.startswith(base)


def relativize(base: Union[str, Path],
               target: Union[str, Path],
               segment_aware: bool = False) -> str:
    """Compute the path of target relative to base

    Both paths are canonicalized first. The base climbs one parent at a
    time, adding a ``..`` segment per step, until target lies under it.

    Containment is a plain string-prefix test by default, so ``/data/foo``
    is taken to contain ``/data/foobar``. Pass ``segment_aware=True`` to
    only match whole path segments.

    Args:
        base: Path the result is relative to
        target: Path to express relative to base
        segment_aware: Only accept prefixes ending at a separator

    Returns:
        Relative path string (``"."`` when target is base)

    Raises:
        NoCommonDirectoryError: If base is a filesystem root, or the only
            directory shared with target is the root
    """
    base_path = Path(base).resolve()
    target_str = str(Path(target).resolve())
    climbed = 0

    while base_path.parent != base_path:
        base_str = str(base_path)
        if _is_under(base_str, target_str, segment_aware):
            segments = [os.pardir] * climbed
            remainder = target_str[len(base_str) + 1:]
            if remainder:
                segments.append(remainder)
            return os.sep.join(segments) or os.curdir

        climbed += 1
        base_path = base_path.parent

    raise NoCommonDirectoryError(str(base), str(target))


class PathResolver:
    """Resolves paths within a getdown-tool build"""

    def __init__(self,
                 project_root: Union[str, Path],
                 work_directory: Union[str, Path] = DEFAULT_WORK_DIR,
                 staging: Optional[StagingConfig] = None,
                 descriptor: str = DEFAULT_DESCRIPTOR_FILE):
        """Initialize path resolver

        Args:
            project_root: Root directory of the project
            work_directory: Working root, absolute or relative to project root
            staging: Staging configuration
            descriptor: Descriptor file name inside the working root
        """
        self.project_root = Path(project_root).resolve()
        self.work_directory = self.resolve(work_directory)
        self.staging = staging or StagingConfig()
        self.descriptor = descriptor

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(path)

        if path.is_absolute():
            return path

        return (self.project_root / path).resolve()

    def get_staging_dir(self) -> Path:
        """Get the directory resources are staged into"""
        return self.staging.staging_directory(self.work_directory)

    def get_descriptor_path(self) -> Path:
        """Get the descriptor file path"""
        return self.work_directory / self.descriptor

    def make_relative(self, path: Union[str, Path], segment_aware: bool = False) -> str:
        """Make a path relative to the working directory

        Args:
            path: Path to make relative
            segment_aware: Only accept prefixes ending at a separator

        Returns:
            Relative path string

        Raises:
            NoCommonDirectoryError: If no common directory exists
        """
        return relativize(self.work_directory, self.resolve(path), segment_aware)
