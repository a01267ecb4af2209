"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any, Tuple

from ..api.exceptions import ConfigError, SigningError
from ..constants import (
    CLASSPATH_PREFIX,
    DEFAULT_DESCRIPTOR_FILE,
    DEFAULT_STORE_TYPE,
    DEFAULT_WORK_DIR,
)
from ..utils.path_utils import normalize_sub_path


def _option_name(key: str, section: str) -> str:
    return f"{section}.{key}" if section else key


def _get_str(data: Dict[str, Any], key: str, section: str = "") -> Optional[str]:
    """Read an optional string value from a config section"""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{_option_name(key, section)}' must be a string, got {type(value).__name__}")
    return value


def _get_str_list(data: Dict[str, Any], key: str, section: str = "") -> List[str]:
    """Read an optional list of strings from a config section"""
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{_option_name(key, section)}' must be a list of strings")
    return list(value)


def _get_location(data: Dict[str, Any], key: str) -> Optional[str]:
    """Read an optional UI resource location, rejecting blank values"""
    value = _get_str(data, key, "ui")
    if value is not None and not value.strip():
        raise ConfigError(f"'ui.{key}' must not be empty")
    return value


def _get_section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


@dataclass(frozen=True)
class UiConfig:
    """UI resources referenced by the descriptor

    Every field is a filesystem location that has not been checked for
    existence yet. Icons keep their configured order.
    """

    background_image: Optional[str] = None
    error_background: Optional[str] = None
    icons: Tuple[str, ...] = ()
    progress_image: Optional[str] = None
    mac_dock_icon: Optional[str] = None

    def __post_init__(self):
        # Accept any sequence for icons but store it immutably
        object.__setattr__(self, "icons", tuple(self.icons or ()))

    @property
    def is_empty(self) -> bool:
        """Check if no UI resource is configured"""
        return not any([
            self.background_image,
            self.error_background,
            self.icons,
            self.progress_image,
            self.mac_dock_icon,
        ])

    def resolve_against(self, root: Path) -> 'UiConfig':
        """Return a copy with relative locations resolved against root"""

        def _resolve(location: Optional[str]) -> Optional[str]:
            if location is None:
                return None
            path = Path(location)
            if path.is_absolute():
                return location
            return str(root / path)

        return UiConfig(
            background_image=_resolve(self.background_image),
            error_background=_resolve(self.error_background),
            icons=tuple(_resolve(i) for i in self.icons),
            progress_image=_resolve(self.progress_image),
            mac_dock_icon=_resolve(self.mac_dock_icon),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data: Dict[str, Any] = {}
        if self.background_image:
            data["background_image"] = self.background_image
        if self.error_background:
            data["error_background"] = self.error_background
        if self.icons:
            data["icons"] = list(self.icons)
        if self.progress_image:
            data["progress_image"] = self.progress_image
        if self.mac_dock_icon:
            data["mac_dock_icon"] = self.mac_dock_icon
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UiConfig':
        """Create from dictionary

        Raises:
            ConfigError: If a value has the wrong type or a location is blank
        """
        icons = _get_str_list(data, "icons", "ui")
        if any(not icon.strip() for icon in icons):
            raise ConfigError("'ui.icons' must not contain empty locations")

        return cls(
            background_image=_get_location(data, "background_image"),
            error_background=_get_location(data, "error_background"),
            icons=tuple(icons),
            progress_image=_get_location(data, "progress_image"),
            mac_dock_icon=_get_location(data, "mac_dock_icon"),
        )


@dataclass(frozen=True)
class StagingConfig:
    """Where resources are staged, relative to the working root"""

    resource_sets_path: Optional[str] = None

    @property
    def sub_path(self) -> Optional[str]:
        """Normalized sub-path, or None when resources go to the working root

        Blank values count as absent so the staging directory and the
        descriptor names always agree.
        """
        return normalize_sub_path(self.resource_sets_path)

    def staging_directory(self, work_directory: Path) -> Path:
        """Directory resources are copied into"""
        sub_path = self.sub_path
        if sub_path:
            return Path(work_directory) / sub_path
        return Path(work_directory)


@dataclass
class SignConfig:
    """Code-signing configuration

    The keystore may be a filesystem path (relative to the working
    directory) or a ``classpath:`` reference located through the
    class path loader handed to :meth:`init`.
    """

    keystore: Optional[str] = None
    storepass: Optional[str] = None
    alias: Optional[str] = None
    keypass: Optional[str] = None
    storetype: str = DEFAULT_STORE_TYPE
    command: List[str] = field(default_factory=list)

    # Populated by init()
    work_directory: Optional[Path] = field(default=None, init=False, repr=False)
    debug: bool = field(default=False, init=False, repr=False)
    keystore_path: Optional[Path] = field(default=None, init=False, repr=False)
    _sign_tool: Any = field(default=None, init=False, repr=False)
    _loader: Any = field(default=None, init=False, repr=False)

    @property
    def initialized(self) -> bool:
        return self.work_directory is not None

    def init(self, work_directory: Path, debug: bool, sign_tool: Any, loader: Any) -> None:
        """Prepare the configuration for signing

        Args:
            work_directory: Working directory of the build
            debug: Whether debug output is enabled
            sign_tool: Signing capability used by :meth:`sign`
            loader: Class path loader used to locate ``classpath:`` keystores

        Raises:
            SigningError: If the keystore cannot be located
        """
        self.work_directory = Path(work_directory)
        self.debug = debug
        self._sign_tool = sign_tool
        self._loader = loader
        self.keystore_path = self._locate_keystore()

    def _locate_keystore(self) -> Optional[Path]:
        if not self.keystore:
            return None

        if self.keystore.startswith(CLASSPATH_PREFIX):
            name = self.keystore[len(CLASSPATH_PREFIX):].lstrip("/")
            found = self._loader.find_resource(name) if self._loader else None
            if found is None:
                raise SigningError(f"Keystore not found on class path: {name}")
            return found

        path = Path(self.keystore)
        if not path.is_absolute():
            path = self.work_directory / path
        return path

    def sign(self, target: Path) -> None:
        """Sign a file through the configured sign tool"""
        if not self.initialized:
            raise SigningError("Sign configuration used before init()")
        if self._sign_tool is None:
            raise SigningError("No sign tool available")
        self._sign_tool.sign(self, Path(target))

    def placeholders(self) -> Dict[str, str]:
        """Values available to sign command templates"""
        return {
            "keystore": str(self.keystore_path or self.keystore or ""),
            "storepass": self.storepass or "",
            "alias": self.alias or "",
            "keypass": self.keypass or "",
            "storetype": self.storetype or "",
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "keystore": self.keystore,
            "storepass": self.storepass,
            "alias": self.alias,
            "keypass": self.keypass,
            "storetype": self.storetype,
        }
        if self.command:
            data["command"] = list(self.command)
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SignConfig':
        """Create from dictionary"""
        return cls(
            keystore=_get_str(data, "keystore", "sign"),
            storepass=_get_str(data, "storepass", "sign"),
            alias=_get_str(data, "alias", "sign"),
            keypass=_get_str(data, "keypass", "sign"),
            storetype=_get_str(data, "storetype", "sign") or DEFAULT_STORE_TYPE,
            command=_get_str_list(data, "command", "sign"),
        )


@dataclass
class BuildConfig:
    """Complete configuration of one descriptor build"""

    project_root: Path = field(default_factory=Path.cwd)
    work_directory: Path = Path(DEFAULT_WORK_DIR)
    staging: StagingConfig = field(default_factory=StagingConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    sign: Optional[SignConfig] = None
    classpath: List[str] = field(default_factory=list)
    descriptor: str = DEFAULT_DESCRIPTOR_FILE
    verbose: bool = False

    def __post_init__(self):
        self.project_root = Path(self.project_root)
        work_directory = Path(self.work_directory)
        if not work_directory.is_absolute():
            work_directory = self.project_root / work_directory
        self.work_directory = work_directory

    @property
    def resource_sets_path(self) -> Optional[str]:
        return self.staging.sub_path

    @property
    def staging_directory(self) -> Path:
        return self.staging.staging_directory(self.work_directory)

    @property
    def descriptor_path(self) -> Path:
        return self.work_directory / self.descriptor

    @classmethod
    def from_dict(cls, data: Dict[str, Any], project_root: Optional[Path] = None) -> 'BuildConfig':
        """Create from dictionary

        Args:
            data: Parsed configuration mapping
            project_root: Directory relative paths are resolved against

        Returns:
            BuildConfig instance
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a mapping")

        root = Path(project_root) if project_root else Path.cwd()

        sign_data = data.get("sign")
        if sign_data is not None and not isinstance(sign_data, dict):
            raise ConfigError("'sign' must be a mapping")

        verbose = data.get("verbose", False)
        if not isinstance(verbose, bool):
            raise ConfigError("'verbose' must be a boolean")

        return cls(
            project_root=root,
            work_directory=Path(_get_str(data, "work_directory") or DEFAULT_WORK_DIR),
            staging=StagingConfig(_get_str(data, "resource_sets_path")),
            ui=UiConfig.from_dict(_get_section(data, "ui")).resolve_against(root),
            sign=SignConfig.from_dict(sign_data) if sign_data is not None else None,
            classpath=[str(root / entry) if entry and not Path(entry).is_absolute() else entry
                       for entry in _get_str_list(data, "classpath")],
            descriptor=_get_str(data, "descriptor") or DEFAULT_DESCRIPTOR_FILE,
            verbose=verbose,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data: Dict[str, Any] = {
            "work_directory": str(self.work_directory),
            "descriptor": self.descriptor,
            "verbose": self.verbose,
        }
        if self.staging.resource_sets_path is not None:
            data["resource_sets_path"] = self.staging.resource_sets_path
        ui = self.ui.to_dict()
        if ui:
            data["ui"] = ui
        if self.sign is not None:
            data["sign"] = self.sign.to_dict()
        if self.classpath:
            data["classpath"] = list(self.classpath)
        return data
