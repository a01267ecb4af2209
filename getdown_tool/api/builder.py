"""Builder API for descriptor builds"""

import io
import logging
import time
from pathlib import Path
from typing import List, Optional, TextIO

from ..constants import DESCRIPTOR_ENCODING
from ..core import (
    PathResolver,
    ResourceStager,
    SignTool,
    SigningOrchestrator,
    write_resource_lines,
    write_ui_section,
)
from ..models import BuildConfig, BuildResult
from ..utils import atomic_write, verbose_log
from .exceptions import DescriptorError

logger = logging.getLogger(__name__)


class DescriptorBuilder:
    """Stages UI resources and writes the matching descriptor"""

    def __init__(self, config: BuildConfig, sign_tool: Optional[SignTool] = None):
        """
        Initialize builder

        Args:
            config: Build configuration
            sign_tool: Signing capability handed to the sign configuration
        """
        self.config = config
        self.path_resolver = PathResolver(
            config.project_root,
            config.work_directory,
            config.staging,
            config.descriptor,
        )
        self.stager = ResourceStager(self.path_resolver.work_directory, config.staging)
        self.signing = SigningOrchestrator(sign_tool)

    def _log(self, msg: str) -> None:
        verbose_log(logger, self.config.verbose, msg)

    def init_signing(self) -> bool:
        """
        Prepare signing if a sign configuration is set

        Returns:
            True if signing was initialized

        Raises:
            ClassLoaderError: If the class path is malformed
            SigningError: If the sign configuration cannot be initialized
        """
        loader = self.signing.init_signing(
            self.config.sign,
            self.path_resolver.work_directory,
            logger.isEnabledFor(logging.DEBUG),
            self.config.classpath,
        )
        if loader is not None:
            self._log(f"Signing initialized with {len(loader.entries)} class path entries")
        return loader is not None

    def stage(self) -> List[Path]:
        """
        Copy UI resources into the staging directory

        Raises:
            StagingError: If a resource cannot be staged
        """
        self._log(f"Staging UI resources into {self.path_resolver.get_staging_dir()}")
        return self.stager.stage_all(self.config.ui)

    def write_descriptor(self, out: TextIO) -> None:
        """Write resource lines, a blank line, then the UI section"""
        sub_path = self.config.resource_sets_path
        write_resource_lines(out, self.config.ui, sub_path)
        out.write("\n")
        write_ui_section(out, self.config.ui, sub_path)

    def render_descriptor(self) -> str:
        """Descriptor text as a string"""
        buffer = io.StringIO()
        self.write_descriptor(buffer)
        return buffer.getvalue()

    def build(self) -> BuildResult:
        """
        Run a full build: signing setup, staging, descriptor

        Any failure aborts the build and propagates to the caller.

        Returns:
            BuildResult on success

        Raises:
            ClassLoaderError, SigningError, StagingError, DescriptorError
        """
        start_time = time.time()

        signing_enabled = self.init_signing()
        staged = self.stage()

        descriptor_path = self.path_resolver.get_descriptor_path()
        self._log(f"Writing descriptor {descriptor_path}")
        try:
            atomic_write(descriptor_path, self.render_descriptor(), encoding=DESCRIPTOR_ENCODING)
        except OSError as e:
            raise DescriptorError(f"Failed writing descriptor {descriptor_path}: {e}") from e

        return BuildResult(
            success=True,
            work_directory=self.path_resolver.work_directory,
            descriptor_path=descriptor_path,
            staged_files=staged,
            signing_enabled=signing_enabled,
            duration=time.time() - start_time,
            metadata={"resource_sets_path": self.config.resource_sets_path},
        )


def build(config: BuildConfig, sign_tool: Optional[SignTool] = None) -> BuildResult:
    """
    Convenience function for a full build

    Args:
        config: Build configuration
        sign_tool: Signing capability

    Returns:
        BuildResult
    """
    return DescriptorBuilder(config, sign_tool).build()
