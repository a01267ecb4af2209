import sys
from pathlib import Path

import pytest

from getdown_tool.api.exceptions import ClassLoaderError, SigningError
from getdown_tool.core.signing import (
    ClassPathLoader,
    CommandSignTool,
    SigningOrchestrator,
    init_signing,
)
from getdown_tool.models import SignConfig


class RecordingSignTool:
    def __init__(self):
        self.calls = []

    def sign(self, sign_config, target):
        self.calls.append((sign_config, target))


class RecordingSignConfig(SignConfig):
    def init(self, work_directory, debug, sign_tool, loader):
        self.init_args = (work_directory, debug, sign_tool, loader)
        super().init(work_directory, debug, sign_tool, loader)


@pytest.fixture
def class_path(tmp_path: Path) -> Path:
    cp = tmp_path / "classes"
    (cp / "keys").mkdir(parents=True)
    (cp / "keys" / "release.jks").write_bytes(b"keystore")
    return cp


def test_no_sign_config_is_noop(tmp_path):
    tool = RecordingSignTool()
    assert init_signing(None, tmp_path, False, tool, ["", "\x00bad"]) is None
    assert tool.calls == []


def test_delegates_to_sign_config(tmp_path, class_path):
    tool = RecordingSignTool()
    config = RecordingSignConfig(keystore="keystore.jks", alias="release")

    loader = init_signing(config, tmp_path, True, tool, [str(class_path)])

    work_directory, debug, sign_tool, passed_loader = config.init_args
    assert work_directory == tmp_path
    assert debug is True
    assert sign_tool is tool
    assert passed_loader is loader
    assert loader.urls == [class_path.resolve().as_uri()]
    assert config.keystore_path == tmp_path / "keystore.jks"


def test_classpath_keystore_is_located(tmp_path, class_path):
    config = SignConfig(keystore="classpath:keys/release.jks")
    init_signing(config, tmp_path, False, None, [str(tmp_path / "missing"), str(class_path)])
    assert config.keystore_path == class_path.resolve() / "keys" / "release.jks"


def test_classpath_keystore_missing(tmp_path, class_path):
    config = SignConfig(keystore="classpath:keys/other.jks")
    with pytest.raises(SigningError):
        init_signing(config, tmp_path, False, None, [str(class_path)])


@pytest.mark.parametrize("entry", ["", "   ", "lib\x00.jar", None])
def test_malformed_entry_aborts_before_init(tmp_path, class_path, entry):
    config = RecordingSignConfig(keystore="k.jks")
    with pytest.raises(ClassLoaderError) as info:
        init_signing(config, tmp_path, False, None, [str(class_path), entry])
    assert info.value.error_code == "GT004"
    assert not hasattr(config, "init_args")
    assert not config.initialized


def test_relative_entries_become_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    loader = ClassPathLoader(["lib/app.jar"])
    assert loader.entries == [tmp_path.resolve() / "lib" / "app.jar"]
    assert loader.urls[0].startswith("file://")


def test_sign_requires_init(tmp_path):
    with pytest.raises(SigningError):
        SignConfig().sign(tmp_path / "digest.txt")


def test_sign_delegates_to_tool(tmp_path):
    tool = RecordingSignTool()
    config = SignConfig(alias="release")
    SigningOrchestrator(tool).init_signing(config, tmp_path, False, [])

    config.sign(tmp_path / "digest.txt")
    assert tool.calls == [(config, tmp_path / "digest.txt")]


def test_command_sign_tool_placeholders(tmp_path):
    config = SignConfig(keystore="k.jks", storepass="pw", alias="me")
    config.init(tmp_path, False, None, None)
    tool = CommandSignTool(["signer", "-keystore", "{keystore}", "{target}", "{alias}"])

    args = tool.build_args(config, tmp_path / "digest.txt")
    assert args == ["signer", "-keystore", str(tmp_path / "k.jks"), str(tmp_path / "digest.txt"), "me"]


def test_command_sign_tool_unknown_placeholder(tmp_path):
    tool = CommandSignTool(["signer", "{nope}"])
    with pytest.raises(SigningError):
        tool.build_args(SignConfig(), tmp_path / "f")


def test_command_sign_tool_runs_command(tmp_path):
    target = tmp_path / "digest.txt"
    target.write_text("digest")
    script = "import sys; open(sys.argv[1] + '.sig', 'w').write(sys.argv[2])"
    config = SignConfig(alias="release", command=[sys.executable, "-c", script, "{target}", "{alias}"])
    config.init(tmp_path, False, CommandSignTool(config.command), None)

    config.sign(target)
    assert (tmp_path / "digest.txt.sig").read_text() == "release"


def test_command_sign_tool_failure(tmp_path):
    config = SignConfig()
    config.init(tmp_path, False, CommandSignTool([sys.executable, "-c", "import sys; sys.exit(3)"]), None)
    with pytest.raises(SigningError):
        config.sign(tmp_path / "digest.txt")


def test_empty_sign_command_rejected():
    with pytest.raises(SigningError):
        CommandSignTool([])
