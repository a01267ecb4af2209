"""Core functionality for getdown-tool"""

from .path_resolver import PathResolver, relativize
from .resource_namer import descriptor_name, resource_basename
from .resource_stager import ResourceStager, stage_all
from .descriptor_writer import write_resource_lines, write_ui_section
from .signing import (
    ClassPathLoader,
    CommandSignTool,
    SignTool,
    SigningOrchestrator,
    init_signing,
)

__all__ = [
    "PathResolver",
    "relativize",
    "descriptor_name",
    "resource_basename",
    "ResourceStager",
    "stage_all",
    "write_resource_lines",
    "write_ui_section",
    "ClassPathLoader",
    "CommandSignTool",
    "SignTool",
    "SigningOrchestrator",
    "init_signing",
]
