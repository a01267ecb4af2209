import io

from getdown_tool.core.descriptor_writer import write_resource_lines, write_ui_section
from getdown_tool.models import UiConfig


def _render(writer, ui, sub_path):
    out = io.StringIO()
    writer(out, ui, sub_path)
    return out.getvalue()


def test_resource_lines_example():
    ui = UiConfig(background_image="/art/bg.png", icons=["/art/a.png", "/art/b.png"])
    assert _render(write_resource_lines, ui, "res") == (
        "resource = res/bg.png\n"
        "resource = res/a.png\n"
        "resource = res/b.png\n"
    )


def test_ui_section_example():
    ui = UiConfig(background_image="/art/bg.png", icons=["/art/a.png", "/art/b.png"])
    assert _render(write_ui_section, ui, "res") == (
        "# UI Configuration\n"
        "ui.background_image = res/bg.png\n"
        "ui.icon = res/a.png\n"
        "ui.icon = res/b.png\n"
    )


def test_resource_lines_order_and_dock_icon_excluded(full_ui):
    lines = _render(write_resource_lines, full_ui, None).splitlines()
    assert lines == [
        "resource = bg.png",
        "resource = err.png",
        "resource = a.png",
        "resource = b.png",
        "resource = progress.png",
    ]


def test_ui_section_all_fields(full_ui):
    lines = _render(write_ui_section, full_ui, "ui").splitlines()
    assert lines == [
        "# UI Configuration",
        "ui.background_image = ui/bg.png",
        "ui.error_background = ui/err.png",
        "ui.icon = ui/a.png",
        "ui.icon = ui/b.png",
        "ui.progress_image = ui/progress.png",
        "ui.mac_dock_icon = ui/dock.icns",
    ]


def test_empty_ui():
    assert _render(write_resource_lines, UiConfig(), "res") == ""
    assert _render(write_ui_section, UiConfig(), "res") == "# UI Configuration\n"


def test_writes_append_to_sink():
    out = io.StringIO()
    out.write("appbase = http://example.com/app/\n")
    write_resource_lines(out, UiConfig(progress_image="p.png"), None)
    assert out.getvalue() == "appbase = http://example.com/app/\nresource = p.png\n"
