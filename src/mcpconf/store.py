# Config file storage and server-map mutation for mcpconf
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from mcpconf.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    InvalidServerEntryError,
    ServerAlreadyExistsError,
    ServerNotFoundError,
)
from mcpconf.models import SERVERS_KEY, ConfigDocument, ServerEntry
from mcpconf.settings import JSON_INDENT
from mcpconf.utils.backup import create_backup

logger = logging.getLogger(__name__)


def load_document(path: Path) -> ConfigDocument:
    """Read and parse the JSON config file at path.

    ABOUTME: Missing file is its own error so callers can branch on it
    ABOUTME: No recovery or partial parsing of broken JSON

    Args:
        path: Config file to read

    Returns:
        Parsed document (a JSON object)

    Raises:
        ConfigFileNotFoundError: If no file exists at path
        ConfigReadError: For any other I/O or decoding failure
        ConfigParseError: If the content is not a JSON object
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"Error reading configuration file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Invalid configuration in {path}: top-level value must be a JSON object"
        )

    logger.debug(f"Loaded {path}")
    return data


def persist_document(
    path: Path,
    document: ConfigDocument,
    backup_dir: Path | None = None,
    backup_label: str | None = None,
) -> None:
    """Write document to path as pretty-printed JSON, replacing the file.

    ABOUTME: Creates parent directories if needed
    ABOUTME: Writes a temp file next to the target then renames it over
    ABOUTME: Writes through symlinks and keeps the existing file mode
    ABOUTME: Optionally backs up the previous file first

    Args:
        path: Config file to write
        document: Full document; sibling keys are written as given
        backup_dir: Where to copy the previous file, if anywhere
        backup_label: Prefix for the backup filename

    Raises:
        ConfigWriteError: On any I/O or permission error
    """
    try:
        text = json.dumps(document, indent=JSON_INDENT, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as e:
        raise ConfigWriteError(f"Error serializing configuration for {path}: {e}") from e

    tmp_name: str | None = None
    try:
        # Replace the symlink target, not the link
        target = path.resolve()
        target.parent.mkdir(parents=True, exist_ok=True)

        if backup_dir is not None and target.exists():
            create_backup(target, backup_dir, backup_label)

        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=str(target.parent),
            prefix=target.name + ".",
            suffix=".tmp",
            delete=False,
        ) as tf:
            tmp_name = tf.name
            tf.write(text)

        if target.exists():
            shutil.copymode(target, tmp_name)

        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise ConfigWriteError(f"Error writing configuration file {path}: {e}") from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.info(f"Wrote {path}")


def _servers(document: ConfigDocument) -> dict[str, Any] | None:
    """Return the server map, or None when absent or not an object."""
    servers = document.get(SERVERS_KEY)
    return servers if isinstance(servers, dict) else None


def list_server_names(document: ConfigDocument) -> list[str]:
    """Names under mcpServers in document order; empty if there is no map."""
    servers = _servers(document)
    return list(servers) if servers is not None else []


def get_server(document: ConfigDocument, name: str) -> ServerEntry:
    """Return the entry stored under name.

    Raises:
        ServerNotFoundError: If mcpServers is absent or has no such entry
    """
    servers = _servers(document)
    if servers is None or name not in servers:
        raise ServerNotFoundError(f"Server '{name}' not found")
    return servers[name]


def upsert_server(
    document: ConfigDocument,
    name: str,
    entry: ServerEntry,
    allow_override: bool = False,
) -> tuple[ConfigDocument, bool]:
    """Insert or replace a server entry in document.

    ABOUTME: Creates mcpServers when absent
    ABOUTME: Refuses to replace an existing entry unless allow_override
    ABOUTME: Mutates document in place and returns it

    Args:
        document: Document to update
        name: Server name
        entry: Server configuration object
        allow_override: Whether an existing entry may be replaced

    Returns:
        Tuple of (document, was_override)

    Raises:
        InvalidServerEntryError: If entry is not a JSON object
        ServerAlreadyExistsError: If name exists and allow_override is False
        ConfigParseError: If mcpServers exists but is not an object
    """
    if not isinstance(entry, dict):
        raise InvalidServerEntryError(
            f"Server '{name}' configuration must be a JSON object, got {type(entry).__name__}"
        )

    # null counts as absent
    if document.get(SERVERS_KEY) is None:
        document[SERVERS_KEY] = {}

    servers = _servers(document)
    if servers is None:
        raise ConfigParseError(f"Invalid configuration: '{SERVERS_KEY}' must be a JSON object")

    exists = name in servers
    if exists and not allow_override:
        raise ServerAlreadyExistsError(
            f"Server '{name}' already exists. Set allow_override to true to update it."
        )

    servers[name] = entry
    return document, exists


def remove_server(document: ConfigDocument, name: str) -> tuple[ConfigDocument, ServerEntry | None]:
    """Remove name from the server map.

    Absence is not an error: the document comes back unchanged with None.
    """
    servers = _servers(document)
    if servers is None or name not in servers:
        return document, None
    return document, servers.pop(name)


class ConfigStore:
    """Load and persist the config file at one resolved path.

    ABOUTME: Holds no document state; every load goes back to disk
    """

    def __init__(self, path: Path, backup_dir: Path | None = None, backup_label: str | None = None) -> None:
        self.path = path
        self.backup_dir = backup_dir
        self.backup_label = backup_label

    def load(self) -> ConfigDocument:
        return load_document(self.path)

    def persist(self, document: ConfigDocument) -> None:
        persist_document(self.path, document, self.backup_dir, self.backup_label)
