import logging

import pytest

from getdown_tool import DescriptorBuilder, build
from getdown_tool.api.exceptions import ClassLoaderError, StagingError
from getdown_tool.models import BuildConfig, SignConfig, StagingConfig, UiConfig


def _config(tmp_path, ui, sub_path="res", **kwargs):
    return BuildConfig(
        project_root=tmp_path,
        work_directory=tmp_path / "work",
        staging=StagingConfig(sub_path),
        ui=ui,
        **kwargs
    )


def _descriptor_names(text):
    names = []
    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue
        _, value = line.split(" = ", 1)
        names.append(value)
    return names


def test_build_writes_descriptor(tmp_path, full_ui):
    result = build(_config(tmp_path, full_ui))

    assert result.success
    assert result.descriptor_path == tmp_path / "work" / "getdown.txt"
    assert len(result.staged_files) == 6
    assert not result.signing_enabled
    assert result.descriptor_path.read_text(encoding="utf-8") == (
        "resource = res/bg.png\n"
        "resource = res/err.png\n"
        "resource = res/a.png\n"
        "resource = res/b.png\n"
        "resource = res/progress.png\n"
        "\n"
        "# UI Configuration\n"
        "ui.background_image = res/bg.png\n"
        "ui.error_background = res/err.png\n"
        "ui.icon = res/a.png\n"
        "ui.icon = res/b.png\n"
        "ui.progress_image = res/progress.png\n"
        "ui.mac_dock_icon = res/dock.icns\n"
    )


@pytest.mark.parametrize("sub_path", [None, "", "res", "res/", "/res", "/ui/images/", "ui/images"])
def test_descriptor_names_match_staged_files(tmp_path, full_ui, sub_path):
    result = build(_config(tmp_path, full_ui, sub_path))

    text = result.descriptor_path.read_text(encoding="utf-8")
    for name in _descriptor_names(text):
        assert (tmp_path / "work" / name).is_file(), name


def test_render_without_staging(tmp_path):
    ui = UiConfig(background_image="/art/bg.png", icons=["/art/a.png", "/art/b.png"])
    builder = DescriptorBuilder(_config(tmp_path, ui))

    text = builder.render_descriptor()
    assert text.startswith("resource = res/bg.png\nresource = res/a.png\nresource = res/b.png\n")
    assert "ui.progress_image" not in text
    assert "ui.mac_dock_icon" not in text
    assert not (tmp_path / "work").exists()


def test_build_with_signing(tmp_path, full_ui):
    classes = tmp_path / "classes"
    (classes / "keys").mkdir(parents=True)
    (classes / "keys" / "release.jks").write_bytes(b"keystore")
    sign = SignConfig(keystore="classpath:keys/release.jks", alias="release")

    result = build(_config(tmp_path, full_ui, sign=sign, classpath=[str(classes)]))

    assert result.signing_enabled
    assert sign.work_directory == tmp_path / "work"
    assert sign.keystore_path == classes.resolve() / "keys" / "release.jks"


def test_bad_class_path_aborts_build(tmp_path, full_ui):
    config = _config(tmp_path, full_ui, sign=SignConfig(), classpath=[""])
    with pytest.raises(ClassLoaderError):
        build(config)
    assert not (tmp_path / "work").exists()


def test_staging_failure_skips_descriptor(tmp_path, full_ui):
    ui = UiConfig(background_image=str(tmp_path / "missing.png"), icons=full_ui.icons)
    with pytest.raises(StagingError):
        build(_config(tmp_path, ui))
    assert not (tmp_path / "work" / "getdown.txt").exists()


def test_verbose_build_logs_at_info(tmp_path, full_ui, caplog):
    caplog.set_level(logging.DEBUG, logger="getdown_tool")
    build(_config(tmp_path, full_ui, verbose=True))
    builder_records = [r for r in caplog.records if r.name == "getdown_tool.api.builder"]
    assert builder_records
    assert all(r.levelno == logging.INFO for r in builder_records)


def test_quiet_build_logs_at_debug(tmp_path, full_ui, caplog):
    caplog.set_level(logging.DEBUG, logger="getdown_tool")
    build(_config(tmp_path, full_ui))
    builder_records = [r for r in caplog.records if r.name == "getdown_tool.api.builder"]
    assert builder_records
    assert all(r.levelno == logging.DEBUG for r in builder_records)
