"""Services for getdown-tool"""

from .config_service import ConfigService

__all__ = [
    "ConfigService",
]
