"""Signing preparation

Signing itself is delegated to a :class:`SignTool`. This module builds the
isolated class path view the sign configuration uses to find its keystore
and hands everything to :meth:`SignConfig.init`.
"""

import logging
import subprocess
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Union

from ..api.exceptions import ClassLoaderError, SigningError
from ..models.config import SignConfig

logger = logging.getLogger(__name__)


class SignTool(Protocol):
    """Capability that signs a single file"""

    def sign(self, sign_config: SignConfig, target: Path) -> None:
        ...


class CommandSignTool:
    """Sign tool that runs an external command

    Each command argument may use the ``{keystore}``, ``{storepass}``,
    ``{alias}``, ``{keypass}``, ``{storetype}`` and ``{target}``
    placeholders.
    """

    def __init__(self, command: Sequence[str]):
        if not command:
            raise SigningError("Sign command must not be empty")
        self.command = list(command)

    def build_args(self, sign_config: SignConfig, target: Path) -> List[str]:
        values = dict(sign_config.placeholders(), target=str(target))
        try:
            return [part.format(**values) for part in self.command]
        except (KeyError, IndexError) as e:
            raise SigningError(f"Unknown placeholder in sign command: {e}") from e

    def sign(self, sign_config: SignConfig, target: Path) -> None:
        args = self.build_args(sign_config, target)
        logger.info(f"Signing {target}")

        try:
            subprocess.run(args, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise SigningError(
                f"Sign command failed for {target} (exit {e.returncode}): {e.stderr.strip()}"
            ) from e
        except OSError as e:
            raise SigningError(f"Could not run sign command {args[0]}: {e}") from e


class ClassPathLoader:
    """Isolated view of a class path

    Entries are resolved to absolute locations up front. Lookups only
    consult these entries; ``sys.path`` is left alone.
    """

    def __init__(self, entries: Iterable[Union[str, Path]]):
        """
        Initialize class path loader

        Args:
            entries: Class path entries (directories or archives)

        Raises:
            ClassLoaderError: If an entry is malformed or cannot be resolved
        """
        self.entries: List[Path] = []
        self.urls: List[str] = []

        for entry in entries:
            path = self._resolve_entry(entry)
            self.entries.append(path)
            self.urls.append(path.as_uri())

    @staticmethod
    def _resolve_entry(entry: Union[str, Path]) -> Path:
        text = str(entry) if entry is not None else ""

        if not text.strip():
            raise ClassLoaderError("Could not create class loader: empty class path entry", entry=text)
        if "\x00" in text:
            raise ClassLoaderError(
                f"Could not create class loader: malformed class path entry {text!r}",
                entry=text
            )

        try:
            return Path(text).expanduser().resolve()
        except (OSError, RuntimeError, ValueError) as e:
            raise ClassLoaderError(
                f"Could not create class loader: cannot resolve {text} ({e})",
                entry=text
            ) from e

    def find_resource(self, name: str) -> Optional[Path]:
        """Find a file by relative name in the class path directories

        Args:
            name: Resource name, ``/`` separated

        Returns:
            Path of the first match, or None
        """
        for entry in self.entries:
            if not entry.is_dir():
                continue
            candidate = entry.joinpath(*name.split("/"))
            if candidate.is_file():
                return candidate
        return None


class SigningOrchestrator:
    """Prepares a sign configuration for the build"""

    def __init__(self, sign_tool: Optional[SignTool] = None):
        self.sign_tool = sign_tool

    def init_signing(self,
                     sign_config: Optional[SignConfig],
                     work_directory: Union[str, Path],
                     debug: bool,
                     class_path_entries: Iterable[Union[str, Path]]) -> Optional[ClassPathLoader]:
        """
        Initialize signing when a sign configuration is present

        Args:
            sign_config: Sign configuration, None disables signing
            work_directory: Working directory of the build
            debug: Whether debug output is enabled
            class_path_entries: Entries used to locate ``classpath:`` keystores

        Returns:
            The class path loader handed to the configuration, or None
            when signing is disabled

        Raises:
            ClassLoaderError: If the class path cannot be prepared
            SigningError: If the configuration cannot be initialized
        """
        if sign_config is None:
            logger.debug("No sign configuration, skipping signing setup")
            return None

        loader = ClassPathLoader(class_path_entries)
        logger.debug(f"Signing class path: {loader.urls}")

        sign_config.init(Path(work_directory), debug, self.sign_tool, loader)
        return loader


def init_signing(sign_config: Optional[SignConfig],
                 work_directory: Union[str, Path],
                 debug: bool,
                 sign_tool: Optional[SignTool],
                 class_path_entries: Iterable[Union[str, Path]]) -> Optional[ClassPathLoader]:
    """Initialize signing (see :meth:`SigningOrchestrator.init_signing`)"""
    return SigningOrchestrator(sign_tool).init_signing(
        sign_config, work_directory, debug, class_path_entries
    )
