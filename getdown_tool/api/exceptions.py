"""Exception definitions for getdown-tool API"""

from ..constants import ErrorCode


class GetdownToolError(Exception):
    """Base exception for getdown-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(GetdownToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class PathError(GetdownToolError):
    """Path related error"""
    pass


class NoCommonDirectoryError(PathError):
    """No common directory between a base and a target path"""

    def __init__(self, base: str, target: str):
        message = f"No common directory between {base} and {target}"
        super().__init__(message, ErrorCode.NO_COMMON_DIRECTORY)
        self.base = base
        self.target = target


class ProjectNotFoundError(PathError):
    """Project configuration not found error"""

    def __init__(self, message: str = None):
        if message is None:
            message = (
                "No project configuration found. Please ensure:\n"
                "1. You are in a project directory\n"
                "2. The project root contains .getdown-tool.yaml\n"
                "3. Or use --config to point at the configuration file"
            )
        super().__init__(message, ErrorCode.PROJECT_NOT_FOUND)


class StagingError(GetdownToolError):
    """Resource staging error"""

    def __init__(self, message: str, source: str = None, destination: str = None):
        super().__init__(message, ErrorCode.STAGING_FAILED)
        self.source = source
        self.destination = destination


class ClassLoaderError(GetdownToolError):
    """Class path loader could not be created"""

    def __init__(self, message: str, entry: str = None):
        super().__init__(message, ErrorCode.CLASS_LOADER_FAILED)
        self.entry = entry


class SigningError(GetdownToolError):
    """Signing configuration or delegate error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.SIGNING_FAILED)


class DescriptorError(GetdownToolError):
    """Descriptor could not be written"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.DESCRIPTOR_WRITE_FAILED)
