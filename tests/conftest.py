"""Shared fixtures"""

from pathlib import Path

import pytest

from getdown_tool.models import UiConfig


@pytest.fixture
def art_dir(tmp_path: Path) -> Path:
    """Directory with a set of UI resource files"""
    art = tmp_path / "art"
    (art / "nested").mkdir(parents=True)
    for name in ["bg.png", "err.png", "a.png", "b.png", "progress.png", "dock.icns"]:
        (art / name).write_bytes(f"data:{name}".encode())
    (art / "nested" / "c.png").write_bytes(b"data:c.png")
    return art


@pytest.fixture
def full_ui(art_dir: Path) -> UiConfig:
    return UiConfig(
        background_image=str(art_dir / "bg.png"),
        error_background=str(art_dir / "err.png"),
        icons=[str(art_dir / "a.png"), str(art_dir / "b.png")],
        progress_image=str(art_dir / "progress.png"),
        mac_dock_icon=str(art_dir / "dock.icns"),
    )
