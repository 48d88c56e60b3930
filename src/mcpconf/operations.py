# The six client-configuration operations exposed as MCP tools
import logging
from pathlib import Path, PurePath

from mcpconf.errors import ConfigFileNotFoundError, ServerAlreadyExistsError, ServerNotFoundError
from mcpconf.models import (
    AddResult,
    ClientName,
    ConfigDocument,
    PlatformName,
    RemoveResult,
    ServerEntry,
    empty_document,
)
from mcpconf.paths import resolve_config_path, to_host_path, validate_client_name
from mcpconf.store import ConfigStore, get_server, list_server_names, remove_server, upsert_server

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """Read and edit the MCP server map of each supported client.

    ABOUTME: Every call resolves the path, loads from disk, mutates and persists
    ABOUTME: No document is cached between calls; the file is the source of truth
    ABOUTME: platform/home override host detection (tests, inspecting other layouts)
    """

    def __init__(
        self,
        platform: PlatformName | None = None,
        home: str | PurePath | None = None,
        backup_dir: Path | None = None,
    ) -> None:
        self.platform = platform
        self.home = home
        self.backup_dir = backup_dir

    def get_path(self, client: str) -> PurePath:
        """Return the config file path for client without touching disk."""
        return resolve_config_path(validate_client_name(client), self.platform, self.home)

    def _store(self, client: ClientName) -> ConfigStore:
        return ConfigStore(to_host_path(self.get_path(client)), self.backup_dir, backup_label=client)

    def get_configuration(self, client: str) -> ConfigDocument:
        """Return the whole parsed config document.

        Raises:
            ConfigFileNotFoundError: If the client has no config file
            ConfigReadError: On other read failures
            ConfigParseError: If the file is not a JSON object
        """
        client_name = validate_client_name(client)
        return self._store(client_name).load()

    def list_servers(self, client: str) -> list[str]:
        """Return configured server names; a missing file means none."""
        client_name = validate_client_name(client)
        try:
            document = self._store(client_name).load()
        except ConfigFileNotFoundError:
            logger.debug(f"No {client_name} configuration file, listing no servers")
            return []
        return list_server_names(document)

    def get_server_configuration(self, client: str, server_name: str) -> ServerEntry:
        """Return one server entry.

        A missing config file is reported the same way as a missing server.

        Raises:
            ServerNotFoundError: If the file or the entry does not exist
        """
        client_name = validate_client_name(client)
        try:
            document = self._store(client_name).load()
        except ConfigFileNotFoundError:
            raise ServerNotFoundError(
                f"Server '{server_name}' not found in {client_name} configuration "
                "(configuration file does not exist)"
            ) from None

        try:
            return get_server(document, server_name)
        except ServerNotFoundError:
            raise ServerNotFoundError(
                f"Server '{server_name}' not found in {client_name} configuration"
            ) from None

    def add_server_configuration(
        self,
        client: str,
        server_name: str,
        entry: ServerEntry,
        allow_override: bool = False,
    ) -> AddResult:
        """Add a server entry, or replace it when allow_override is set.

        ABOUTME: A missing config file is created with an empty server map
        ABOUTME: Nothing is written when the add is refused

        Raises:
            InvalidServerEntryError: If entry is not a JSON object
            ServerAlreadyExistsError: If the name exists and allow_override is False
            ConfigWriteError: If the file cannot be written
        """
        client_name = validate_client_name(client)
        store = self._store(client_name)

        try:
            document = store.load()
        except ConfigFileNotFoundError:
            logger.info(f"Creating new {client_name} configuration at {store.path}")
            document = empty_document()

        try:
            document, updated = upsert_server(document, server_name, entry, allow_override)
        except ServerAlreadyExistsError:
            raise ServerAlreadyExistsError(
                f"Server '{server_name}' already exists in {client_name} configuration. "
                "Set allow_override to true to update it."
            ) from None

        store.persist(document)

        result = AddResult(client=client_name, server_name=server_name, updated=updated)
        logger.info(result.message)
        return result

    def remove_server_configuration(self, client: str, server_name: str) -> RemoveResult:
        """Remove a server entry; absence of the file or entry is not an error."""
        client_name = validate_client_name(client)
        store = self._store(client_name)

        try:
            document = store.load()
        except ConfigFileNotFoundError:
            return RemoveResult(client=client_name, server_name=server_name, file_missing=True)

        document, removed = remove_server(document, server_name)
        if removed is None:
            return RemoveResult(client=client_name, server_name=server_name)

        store.persist(document)

        result = RemoveResult(client=client_name, server_name=server_name, removed=removed)
        logger.info(result.message)
        return result
