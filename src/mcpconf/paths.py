# ABOUTME: Maps (client, platform, home directory) to the client's config file path
# ABOUTME: Pure string computation, never touches the filesystem
import logging
import sys
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from mcpconf.errors import InvalidClientError, UnsupportedPlatformError
from mcpconf.models import SUPPORTED_CLIENTS, ClientName, PlatformName

logger = logging.getLogger(__name__)

# ABOUTME: sys.platform values we know how to lay out
_SYS_PLATFORMS: dict[str, PlatformName] = {
    "win32": "windows",
    "darwin": "macos",
}

# ABOUTME: Path flavour per platform so Windows paths render correctly on any host
_PATH_FLAVOURS: dict[PlatformName, type[PurePath]] = {
    "windows": PureWindowsPath,
    "macos": PurePosixPath,
}

_MAC_SUPPORT = ("Library", "Application Support")
_WIN_ROAMING = ("AppData", "Roaming")
_VSCODE_STORAGE = ("Code", "User", "globalStorage")

# ABOUTME: Path segments below the home directory, per platform and client
# ABOUTME: Must cover every client on every platform; there is no fallback
CONFIG_PATHS: dict[PlatformName, dict[ClientName, tuple[str, ...]]] = {
    "macos": {
        "cline": (
            *_MAC_SUPPORT, *_VSCODE_STORAGE,
            "saoudrizwan.claude-dev", "settings", "cline_mcp_settings.json",
        ),
        "roo_code": (
            *_MAC_SUPPORT, *_VSCODE_STORAGE,
            "rooveterinaryinc.roo-cline", "settings", "cline_mcp_settings.json",
        ),
        "windsurf": (".codeium", "windsurf", "mcp_config.json"),
        "cursor": (*_MAC_SUPPORT, "Cursor", "mcp_settings.json"),
        "claude": (*_MAC_SUPPORT, "Claude", "claude_desktop_config.json"),
    },
    "windows": {
        "cline": (
            *_WIN_ROAMING, *_VSCODE_STORAGE,
            "saoudrizwan.claude-dev", "settings", "cline_mcp_settings.json",
        ),
        "roo_code": (
            *_WIN_ROAMING, *_VSCODE_STORAGE,
            "rooveterinaryinc.roo-cline", "settings", "cline_mcp_settings.json",
        ),
        "windsurf": (*_WIN_ROAMING, "WindSurf", "mcp_settings.json"),
        "cursor": (*_WIN_ROAMING, "Cursor", "mcp_settings.json"),
        "claude": (*_WIN_ROAMING, "Claude", "claude_desktop_config.json"),
    },
}

# ABOUTME: Directory name identifying each client's storage, used by path checks
STORAGE_MARKERS: dict[ClientName, str] = {
    "cline": "saoudrizwan.claude-dev",
    "roo_code": "rooveterinaryinc.roo-cline",
    "windsurf": "windsurf",
    "cursor": "Cursor",
    "claude": "Claude",
}


def detect_platform(sys_platform: str | None = None) -> PlatformName:
    """Return the platform name for the running host.

    Args:
        sys_platform: Value to classify instead of ``sys.platform``

    Returns:
        "windows" or "macos"

    Raises:
        UnsupportedPlatformError: For any other operating system
    """
    value = sys.platform if sys_platform is None else sys_platform
    try:
        return _SYS_PLATFORMS[value]
    except KeyError:
        raise UnsupportedPlatformError(f"Unsupported platform: {value}") from None


def validate_client_name(client: str) -> ClientName:
    """Check that client is one of the supported identifiers."""
    if client not in SUPPORTED_CLIENTS:
        raise InvalidClientError(
            f"Invalid client: {client}. Must be one of: {', '.join(SUPPORTED_CLIENTS)}"
        )
    return client  # type: ignore[return-value]


def resolve_config_path(
    client: str,
    platform: str | None = None,
    home: str | PurePath | None = None,
) -> PurePath:
    """Compute the absolute config file path for a client.

    ABOUTME: Looks up CONFIG_PATHS[platform][client] and joins it onto home
    ABOUTME: Result uses the target platform's path flavour

    Args:
        client: Client identifier
        platform: Platform name; detected from the host when omitted
        home: User home/profile directory; Path.home() when omitted

    Returns:
        Config file path (PureWindowsPath or PurePosixPath)

    Raises:
        UnsupportedPlatformError: If platform has no layout
        InvalidClientError: If client is not supported
    """
    platform_name = detect_platform() if platform is None else platform
    if platform_name not in CONFIG_PATHS:
        raise UnsupportedPlatformError(f"Unsupported platform: {platform_name}")

    client_name = validate_client_name(client)
    segments = CONFIG_PATHS[platform_name][client_name]  # type: ignore[index]

    flavour = _PATH_FLAVOURS[platform_name]  # type: ignore[index]
    base = flavour(Path.home() if home is None else home)
    path = base.joinpath(*segments)

    logger.debug(f"Resolved {client_name} config on {platform_name}: {path}")
    return path


def to_host_path(path: PurePath) -> Path:
    """Turn a resolved path into a concrete Path on the running host.

    ABOUTME: Another OS's layout can be resolved and printed but not opened

    Raises:
        UnsupportedPlatformError: If path uses a different operating system's flavour
    """
    if not isinstance(path, type(PurePath())):
        raise UnsupportedPlatformError(
            f"Cannot access {path} from this host: it belongs to another platform's layout"
        )
    return Path(path)
