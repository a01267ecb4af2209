# getdown_tool/models/__init__.py
"""Data models for getdown-tool"""

from .config import UiConfig, StagingConfig, SignConfig, BuildConfig
from .result import BuildResult

__all__ = [
    # Config models
    "UiConfig",
    "StagingConfig",
    "SignConfig",
    "BuildConfig",

    # Result models
    "BuildResult",
]
