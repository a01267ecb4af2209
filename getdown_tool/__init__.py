"""Getdown Tool - Stage launcher resources and write the Getdown descriptor.

The descriptor (``getdown.txt``) references UI resources by the same names
they are staged under, so staged files and descriptor lines always match.
"""

from .__version__ import __version__, __version_info__, __license__

# Core API
from .api.builder import DescriptorBuilder, build
from .core import (
    PathResolver,
    relativize,
    descriptor_name,
    ResourceStager,
    stage_all,
    write_resource_lines,
    write_ui_section,
    ClassPathLoader,
    CommandSignTool,
    SigningOrchestrator,
    init_signing,
)

# Data models
from .models import UiConfig, StagingConfig, SignConfig, BuildConfig, BuildResult

# Exceptions
from .api.exceptions import (
    GetdownToolError,
    ConfigError,
    PathError,
    NoCommonDirectoryError,
    ProjectNotFoundError,
    StagingError,
    ClassLoaderError,
    SigningError,
    DescriptorError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "DescriptorBuilder",
    "PathResolver",
    "ResourceStager",
    "ClassPathLoader",
    "CommandSignTool",
    "SigningOrchestrator",

    # Core API functions
    "build",
    "relativize",
    "descriptor_name",
    "stage_all",
    "write_resource_lines",
    "write_ui_section",
    "init_signing",

    # Data models
    "UiConfig",
    "StagingConfig",
    "SignConfig",
    "BuildConfig",
    "BuildResult",

    # Exceptions
    "GetdownToolError",
    "ConfigError",
    "PathError",
    "NoCommonDirectoryError",
    "ProjectNotFoundError",
    "StagingError",
    "ClassLoaderError",
    "SigningError",
    "DescriptorError",
]
