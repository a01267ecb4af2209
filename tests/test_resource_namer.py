import pytest

from getdown_tool.core.resource_namer import descriptor_name, resource_basename


def test_basename_only_without_prefix():
    assert descriptor_name("/art/bg.png") == "bg.png"
    assert descriptor_name("/art/bg.png", "") == "bg.png"
    assert descriptor_name("/art/bg.png", None) == "bg.png"


def test_prefix_is_prepended():
    assert descriptor_name("/art/bg.png", "assets") == "assets/bg.png"


def test_same_basename_same_name():
    assert descriptor_name("/one/dir/icon.png", "res") == descriptor_name("/two/icon.png", "res")


def test_blank_prefix_is_ignored():
    assert descriptor_name("art/bg.png", "   ") == "bg.png"


def test_trailing_slash_on_prefix():
    assert descriptor_name("art/bg.png", "res/") == "res/bg.png"


def test_leading_slash_on_prefix():
    assert descriptor_name("art/bg.png", "/res") == "res/bg.png"


def test_nested_prefix():
    assert descriptor_name("bg.png", "ui/images") == "ui/images/bg.png"


def test_name_is_repeatable():
    names = {descriptor_name("/art/a.png", "res") for _ in range(5)}
    assert names == {"res/a.png"}


def test_empty_location_rejected():
    with pytest.raises(ValueError):
        resource_basename("")
