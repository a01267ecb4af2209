"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml

from ..api.exceptions import ConfigError, ProjectNotFoundError
from ..constants import ENV_CONFIG_PATH, PROJECT_CONFIG_FILE
from ..models.config import BuildConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading the project build configuration"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize config service

        Args:
            config_path: Explicit configuration file. Falls back to the
                GETDOWN_TOOL_CONFIG environment variable, then to the
                nearest .getdown-tool.yaml above the current directory.
        """
        self._explicit_path = Path(config_path) if config_path else None
        self._config: Optional[BuildConfig] = None

    @property
    def config_path(self) -> Path:
        """Resolved configuration file path"""
        if self._explicit_path:
            return self._explicit_path.resolve()

        env_path = os.environ.get(ENV_CONFIG_PATH)
        if env_path:
            return Path(env_path).resolve()

        return self.find_config_file()

    @staticmethod
    def find_config_file(start: Optional[Path] = None) -> Path:
        """Search upwards for the project configuration file

        Raises:
            ProjectNotFoundError: If no configuration file is found
        """
        current = (start or Path.cwd()).resolve()
        for directory in [current, *current.parents]:
            candidate = directory / PROJECT_CONFIG_FILE
            if candidate.is_file():
                return candidate
        raise ProjectNotFoundError()

    @property
    def config(self) -> BuildConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> BuildConfig:
        """Load configuration from file

        Returns:
            Loaded configuration

        Raises:
            ProjectNotFoundError: If the file does not exist
            ConfigError: If the file is not valid YAML or has bad values
        """
        config_path = self.config_path
        if not config_path.is_file():
            raise ProjectNotFoundError(f"Configuration file not found: {config_path}")

        logger.debug(f"Loading configuration from {config_path}")
        content = config_path.read_text(encoding="utf-8")

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        self._config = BuildConfig.from_dict(data or {}, project_root=config_path.parent)
        return self._config
