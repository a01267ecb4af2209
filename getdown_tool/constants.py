"""Global constants for getdown-tool"""

APP_NAME = "getdown-tool"
LOG_FORMAT = "%(message)s"

# Project identification
PROJECT_CONFIG_FILE = ".getdown-tool.yaml"

# Directory structure
DEFAULT_WORK_DIR = "target/getdown"
DEFAULT_DESCRIPTOR_FILE = "getdown.txt"

# Descriptor format
DESCRIPTOR_ENCODING = "utf-8"
UI_SECTION_HEADER = "# UI Configuration"
RESOURCE_KEY = "resource"
UI_BACKGROUND_IMAGE_KEY = "ui.background_image"
UI_ERROR_BACKGROUND_KEY = "ui.error_background"
UI_ICON_KEY = "ui.icon"
UI_PROGRESS_IMAGE_KEY = "ui.progress_image"
UI_MAC_DOCK_ICON_KEY = "ui.mac_dock_icon"

# Signing
CLASSPATH_PREFIX = "classpath:"
DEFAULT_STORE_TYPE = "JKS"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "GT001"
    NO_COMMON_DIRECTORY = "GT002"
    STAGING_FAILED = "GT003"
    CLASS_LOADER_FAILED = "GT004"
    SIGNING_FAILED = "GT005"
    DESCRIPTOR_WRITE_FAILED = "GT006"
    PROJECT_NOT_FOUND = "GT007"


# Environment variables
ENV_CONFIG_PATH = "GETDOWN_TOOL_CONFIG"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_PACKAGE = "📦"

# Messages templates
MSG_BUILD_SUCCESS = f"{EMOJI_SUCCESS} Descriptor written: {{path}}"
MSG_STAGE_SUCCESS = f"{EMOJI_SUCCESS} Staged {{count}} resource(s) into {{directory}}"
