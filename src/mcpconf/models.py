# Core data types for mcpconf
from dataclasses import dataclass
from typing import Any, Literal, get_args

# ABOUTME: Closed set of clients whose config files we manage
ClientName = Literal["cline", "roo_code", "windsurf", "cursor", "claude"]

# ABOUTME: Host operating systems with a known config layout
PlatformName = Literal["windows", "macos"]

SUPPORTED_CLIENTS: tuple[ClientName, ...] = get_args(ClientName)
SUPPORTED_PLATFORMS: tuple[PlatformName, ...] = get_args(PlatformName)

# ABOUTME: Top-level key holding the server map in every client file
SERVERS_KEY = "mcpServers"

# ABOUTME: Server entries are opaque JSON objects, never inspected
ServerEntry = dict[str, Any]
ConfigDocument = dict[str, Any]


def empty_document() -> ConfigDocument:
    """Return the skeleton written when a client has no config file yet."""
    return {SERVERS_KEY: {}}


@dataclass(frozen=True)
class AddResult:
    """Outcome of adding a server entry to a client config.

    ABOUTME: updated is True when an existing entry was replaced
    """
    client: ClientName
    server_name: str
    updated: bool

    @property
    def message(self) -> str:
        action = "updated" if self.updated else "added"
        return f"Server '{self.server_name}' configuration {action} in {self.client} configuration"


@dataclass(frozen=True)
class RemoveResult:
    """Outcome of removing a server entry from a client config.

    ABOUTME: removed holds the prior entry, or None when nothing matched
    ABOUTME: file_missing distinguishes "no config file" from "no such server"
    """
    client: ClientName
    server_name: str
    removed: ServerEntry | None = None
    file_missing: bool = False

    @property
    def found(self) -> bool:
        return self.removed is not None

    @property
    def message(self) -> str:
        if self.found:
            return f"Server '{self.server_name}' removed from {self.client} configuration"
        message = f"Server '{self.server_name}' not found in {self.client} configuration"
        if self.file_missing:
            message += " (configuration file does not exist)"
        return message
