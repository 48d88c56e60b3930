# ABOUTME: Transport-independent tool dispatch: validate raw arguments, run the operation, render text
# ABOUTME: Shared by the MCP server and the CLI so both report identical results
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from mcpconf.errors import InvalidArgumentError, InvalidServerEntryError
from mcpconf.models import SUPPORTED_CLIENTS, ClientName, ServerEntry
from mcpconf.operations import ConfigurationManager
from mcpconf.paths import validate_client_name
from mcpconf.settings import JSON_INDENT

logger = logging.getLogger(__name__)

_CLIENT_HELP = f"Client name ({', '.join(SUPPORTED_CLIENTS)})"

# ABOUTME: Tool name -> description, in advertisement order
TOOLS: dict[str, str] = {
    "get_configuration_path": "Get the path to the configuration file for a specific client",
    "get_configuration": "Get the entire configuration for a specific client",
    "list_servers": "List all server names configured in a specific client",
    "get_server_configuration": (
        "Get the configuration for a specific server from a client configuration"
    ),
    "add_server_configuration": (
        "Add or update a server configuration in a client configuration"
    ),
    "remove_server_configuration": "Remove a server configuration from a client configuration",
}

# ABOUTME: Argument descriptions shared by the tool schemas
ARGUMENT_HELP: dict[str, str] = {
    "client": _CLIENT_HELP,
    "server_name": "Name of the server",
    "json_config": "Server configuration in JSON format",
    "allow_override": (
        "Whether to allow overriding an existing server configuration with the same name "
        "(default: false)"
    ),
}


def validate_client(value: Any) -> ClientName:
    if not isinstance(value, str):
        raise InvalidArgumentError("client must be a string")
    return validate_client_name(value)


def validate_server_name(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError("server_name must be a string")
    return value


def validate_json_config(value: Any) -> ServerEntry:
    if not isinstance(value, dict):
        raise InvalidServerEntryError("json_config must be a valid JSON object")
    return value


def validate_allow_override(value: Any) -> bool:
    """Absent means False; anything other than a real boolean is rejected."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise InvalidArgumentError("allow_override must be a boolean")
    return value


def render_json(value: Any) -> str:
    return json.dumps(value, indent=JSON_INDENT, ensure_ascii=False)


def _get_configuration_path(manager: ConfigurationManager, args: Mapping[str, Any]) -> str:
    return str(manager.get_path(validate_client(args.get("client"))))


def _get_configuration(manager: ConfigurationManager, args: Mapping[str, Any]) -> str:
    return render_json(manager.get_configuration(validate_client(args.get("client"))))


def _list_servers(manager: ConfigurationManager, args: Mapping[str, Any]) -> str:
    return render_json(manager.list_servers(validate_client(args.get("client"))))


def _get_server_configuration(manager: ConfigurationManager, args: Mapping[str, Any]) -> str:
    client = validate_client(args.get("client"))
    server_name = validate_server_name(args.get("server_name"))
    return render_json(manager.get_server_configuration(client, server_name))


def _add_server_configuration(manager: ConfigurationManager, args: Mapping[str, Any]) -> str:
    client = validate_client(args.get("client"))
    server_name = validate_server_name(args.get("server_name"))
    entry = validate_json_config(args.get("json_config"))
    allow_override = validate_allow_override(args.get("allow_override"))
    return manager.add_server_configuration(client, server_name, entry, allow_override).message


def _remove_server_configuration(manager: ConfigurationManager, args: Mapping[str, Any]) -> str:
    client = validate_client(args.get("client"))
    server_name = validate_server_name(args.get("server_name"))
    result = manager.remove_server_configuration(client, server_name)
    if result.removed is None:
        return result.message
    return render_json(result.removed)


_HANDLERS: dict[str, Callable[[ConfigurationManager, Mapping[str, Any]], str]] = {
    "get_configuration_path": _get_configuration_path,
    "get_configuration": _get_configuration,
    "list_servers": _list_servers,
    "get_server_configuration": _get_server_configuration,
    "add_server_configuration": _add_server_configuration,
    "remove_server_configuration": _remove_server_configuration,
}


def call_tool(manager: ConfigurationManager, name: str, arguments: Mapping[str, Any] | None) -> str:
    """Run one tool call and return its text result.

    ABOUTME: Validates arguments before any filesystem access
    ABOUTME: Errors propagate as ConfigurationError subclasses

    Args:
        manager: Operation surface to call into
        name: Tool name (a key of TOOLS)
        arguments: Raw, unvalidated tool arguments

    Returns:
        A path, pretty-printed JSON, or a status message

    Raises:
        InvalidArgumentError: For an unknown tool or mistyped arguments
        ConfigurationError: Whatever the operation raises
    """
    handler = _HANDLERS.get(name)
    if handler is None:
        raise InvalidArgumentError(f"Unknown tool: {name}")

    logger.debug(f"Calling {name}")
    return handler(manager, arguments or {})
