"""Descriptor-facing names for staged resources

Resources are staged flat into the staging directory, so the name used in
the descriptor is the resource basename, prefixed by the staging sub-path
when one is configured. The stager and the descriptor writer both go
through this module.
"""

import os
from typing import Optional

from ..utils.path_utils import normalize_sub_path


def resource_basename(location: str) -> str:
    """Final path segment of a resource location

    Raises:
        ValueError: If location is empty
    """
    if not location:
        raise ValueError("Resource location must not be empty")

    if os.sep != "/":
        location = location.replace(os.sep, "/")
    return location.rsplit("/", 1)[-1]


def descriptor_name(location: str, resource_sets_path: Optional[str] = None) -> str:
    """Name a resource is referenced by in the descriptor

    Args:
        location: Resource file location
        resource_sets_path: Staging sub-path, blank or None for no prefix

    Returns:
        ``<resource_sets_path>/<basename>`` or just ``<basename>``
    """
    name = resource_basename(location)
    prefix = normalize_sub_path(resource_sets_path)
    if prefix:
        return f"{prefix}/{name}"
    return name
