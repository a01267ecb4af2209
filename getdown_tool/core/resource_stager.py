"""Stage UI resources into the working directory"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..api.exceptions import StagingError
from ..models.config import StagingConfig, UiConfig
from ..utils.file_utils import copy_file_to_dir, ensure_directory
from .resource_namer import resource_basename

logger = logging.getLogger(__name__)


class ResourceStager:
    """Copies UI resource files into the staging directory

    Files land flat in the staging directory under the same basename the
    descriptor references them by.
    """

    def __init__(self, work_directory: Union[str, Path], staging: Optional[StagingConfig] = None):
        """
        Initialize resource stager

        Args:
            work_directory: Working root of the build
            staging: Staging configuration (resources go to the root if absent)
        """
        self.work_directory = Path(work_directory)
        self.staging = staging or StagingConfig()

    @property
    def staging_directory(self) -> Path:
        return self.staging.staging_directory(self.work_directory)

    @staticmethod
    def plan(ui: UiConfig) -> List[Tuple[str, str]]:
        """List (role, location) pairs in staging order"""
        items: List[Tuple[str, str]] = []
        if ui.background_image is not None:
            items.append(("background image", ui.background_image))
        if ui.error_background is not None:
            items.append(("error background", ui.error_background))
        if ui.progress_image is not None:
            items.append(("progress image", ui.progress_image))
        for icon in ui.icons:
            items.append(("icon", icon))
        if ui.mac_dock_icon is not None:
            items.append(("Mac dock icon", ui.mac_dock_icon))
        return items

    def stage_all(self, ui: UiConfig) -> List[Path]:
        """
        Copy every configured UI resource into the staging directory

        Staging stops at the first failure; files already copied stay in
        place. Re-running overwrites earlier copies.

        Args:
            ui: UI configuration

        Returns:
            Paths of the staged files, in staging order

        Raises:
            StagingError: If the directory cannot be created or a copy fails
        """
        items = self.plan(ui)
        if not items:
            logger.debug("No UI resources to stage")
            return []

        directory = self.staging_directory
        try:
            ensure_directory(directory)
        except OSError as e:
            raise StagingError(
                f"Failed creating staging directory: {directory} ({e})",
                destination=str(directory)
            ) from e

        staged: List[Path] = []
        seen = set()
        for role, location in items:
            logger.info(f"Using {role} {location}")
            name = resource_basename(location)
            if name in seen:
                logger.warning(f"Resource name {name} is staged more than once")
            seen.add(name)
            try:
                staged.append(copy_file_to_dir(Path(location), directory, name))
            except OSError as e:
                raise StagingError(
                    f"Failed staging {role} {location} -> {directory / name} ({e})",
                    source=location,
                    destination=str(directory / name)
                ) from e

        return staged


def stage_all(ui: UiConfig,
              work_directory: Union[str, Path],
              resource_sets_path: Optional[str] = None) -> List[Path]:
    """Stage UI resources (see :meth:`ResourceStager.stage_all`)"""
    stager = ResourceStager(work_directory, StagingConfig(resource_sets_path))
    return stager.stage_all(ui)
