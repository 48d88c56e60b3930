# mcpconf - MCP client configuration manager
# ABOUTME: Version information
__version__ = "0.1.0"

# ABOUTME: Export error kinds
from mcpconf.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigurationError,
    ConfigWriteError,
    InvalidArgumentError,
    InvalidClientError,
    InvalidServerEntryError,
    ServerAlreadyExistsError,
    ServerNotFoundError,
    UnsupportedPlatformError,
)

# ABOUTME: Export core data models and the operation surface
from mcpconf.models import SUPPORTED_CLIENTS, AddResult, RemoveResult
from mcpconf.operations import ConfigurationManager
from mcpconf.paths import detect_platform, resolve_config_path

__all__ = [
    "__version__",
    "AddResult",
    "RemoveResult",
    "SUPPORTED_CLIENTS",
    "ConfigurationManager",
    "detect_platform",
    "resolve_config_path",
    "ConfigurationError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigWriteError",
    "InvalidArgumentError",
    "InvalidClientError",
    "InvalidServerEntryError",
    "ServerAlreadyExistsError",
    "ServerNotFoundError",
    "UnsupportedPlatformError",
]
