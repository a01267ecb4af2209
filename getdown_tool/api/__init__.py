# getdown_tool/api/__init__.py
"""API layer for getdown-tool

The builder lives in :mod:`getdown_tool.api.builder`; only the exceptions
are re-exported here so that models can import them without pulling in
the core.
"""

from .exceptions import (
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
