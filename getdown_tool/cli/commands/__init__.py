# getdown_tool/cli/commands/__init__.py
"""CLI commands"""

from . import build
from . import stage
from . import descriptor
from . import relpath
from . import paths

__all__ = [
    "build",
    "stage",
    "descriptor",
    "relpath",
    "paths",
]
