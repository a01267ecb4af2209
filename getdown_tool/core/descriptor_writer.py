"""Descriptor output for UI resources"""

from typing import List, Optional, TextIO, Tuple

from ..constants import (
    RESOURCE_KEY,
    UI_BACKGROUND_IMAGE_KEY,
    UI_ERROR_BACKGROUND_KEY,
    UI_ICON_KEY,
    UI_MAC_DOCK_ICON_KEY,
    UI_PROGRESS_IMAGE_KEY,
    UI_SECTION_HEADER,
)
from ..models.config import UiConfig
from .resource_namer import descriptor_name


def _write_line(out: TextIO, key: str, value: str) -> None:
    out.write(f"{key} = {value}\n")


def resource_entries(ui: UiConfig) -> List[str]:
    """UI resources downloaded by the launcher, in descriptor order

    The Mac dock icon is only used for packaging and is not listed.
    """
    entries: List[str] = []
    if ui.background_image is not None:
        entries.append(ui.background_image)
    if ui.error_background is not None:
        entries.append(ui.error_background)
    entries.extend(ui.icons)
    if ui.progress_image is not None:
        entries.append(ui.progress_image)
    return entries


def ui_entries(ui: UiConfig) -> List[Tuple[str, str]]:
    """(key, location) pairs of the UI section, in descriptor order"""
    entries: List[Tuple[str, str]] = []
    if ui.background_image is not None:
        entries.append((UI_BACKGROUND_IMAGE_KEY, ui.background_image))
    if ui.error_background is not None:
        entries.append((UI_ERROR_BACKGROUND_KEY, ui.error_background))
    for icon in ui.icons:
        entries.append((UI_ICON_KEY, icon))
    if ui.progress_image is not None:
        entries.append((UI_PROGRESS_IMAGE_KEY, ui.progress_image))
    if ui.mac_dock_icon is not None:
        entries.append((UI_MAC_DOCK_ICON_KEY, ui.mac_dock_icon))
    return entries


def write_resource_lines(out: TextIO, ui: UiConfig, resource_sets_path: Optional[str] = None) -> None:
    """Write one ``resource = <name>`` line per downloadable UI resource"""
    for location in resource_entries(ui):
        _write_line(out, RESOURCE_KEY, descriptor_name(location, resource_sets_path))


def write_ui_section(out: TextIO, ui: UiConfig, resource_sets_path: Optional[str] = None) -> None:
    """Write the UI section header followed by one ``ui.<key>`` line per resource"""
    out.write(f"{UI_SECTION_HEADER}\n")
    for key, location in ui_entries(ui):
        _write_line(out, key, descriptor_name(location, resource_sets_path))
