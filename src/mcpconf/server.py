# ABOUTME: MCP stdio server exposing the client-configuration tools via FastMCP
# ABOUTME: Tool bodies delegate to the dispatcher; failures become MCP tool errors
import logging
from collections.abc import Mapping
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from mcpconf.dispatcher import ARGUMENT_HELP, TOOLS, call_tool
from mcpconf.errors import ConfigurationError
from mcpconf.operations import ConfigurationManager
from mcpconf.settings import SERVER_NAME

logger = logging.getLogger(__name__)

ClientArg = Annotated[str, Field(description=ARGUMENT_HELP["client"])]
ServerNameArg = Annotated[str, Field(description=ARGUMENT_HELP["server_name"])]

# ABOUTME: Left as Any for pydantic; dispatcher.validate_* checks their types
JsonConfigArg = Annotated[
    Any,
    Field(description=ARGUMENT_HELP["json_config"], json_schema_extra={"type": "object"}),
]
AllowOverrideArg = Annotated[
    Any,
    Field(description=ARGUMENT_HELP["allow_override"], json_schema_extra={"type": "boolean"}),
]


def run_tool(manager: ConfigurationManager, name: str, arguments: Mapping[str, Any]) -> str:
    """Dispatch one tool call, turning configuration failures into ToolError.

    The error text starts with the failure kind (e.g. ``ServerNotFound: ...``)
    so MCP clients can tell failures apart without parsing prose.
    """
    try:
        return call_tool(manager, name, arguments)
    except ConfigurationError as e:
        logger.warning(f"{name} failed: {e.kind}: {e}")
        raise ToolError(f"{e.kind}: {e}") from e
    except Exception:
        logger.exception(f"{name} failed unexpectedly")
        raise


def create_server(manager: ConfigurationManager | None = None) -> FastMCP:
    """Build the FastMCP server with all six tools registered.

    Args:
        manager: Operation surface; a host-detecting one when omitted

    Returns:
        Configured, not yet running, FastMCP instance
    """
    if manager is None:
        manager = ConfigurationManager()

    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="get_configuration_path", description=TOOLS["get_configuration_path"])
    def get_configuration_path(client: ClientArg) -> str:
        return run_tool(manager, "get_configuration_path", {"client": client})

    @mcp.tool(name="get_configuration", description=TOOLS["get_configuration"])
    def get_configuration(client: ClientArg) -> str:
        return run_tool(manager, "get_configuration", {"client": client})

    @mcp.tool(name="list_servers", description=TOOLS["list_servers"])
    def list_servers(client: ClientArg) -> str:
        return run_tool(manager, "list_servers", {"client": client})

    @mcp.tool(name="get_server_configuration", description=TOOLS["get_server_configuration"])
    def get_server_configuration(client: ClientArg, server_name: ServerNameArg) -> str:
        return run_tool(
            manager,
            "get_server_configuration",
            {"client": client, "server_name": server_name},
        )

    @mcp.tool(name="add_server_configuration", description=TOOLS["add_server_configuration"])
    def add_server_configuration(
        client: ClientArg,
        server_name: ServerNameArg,
        json_config: JsonConfigArg,
        allow_override: AllowOverrideArg = False,
    ) -> str:
        return run_tool(
            manager,
            "add_server_configuration",
            {
                "client": client,
                "server_name": server_name,
                "json_config": json_config,
                "allow_override": allow_override,
            },
        )

    @mcp.tool(name="remove_server_configuration", description=TOOLS["remove_server_configuration"])
    def remove_server_configuration(client: ClientArg, server_name: ServerNameArg) -> str:
        return run_tool(
            manager,
            "remove_server_configuration",
            {"client": client, "server_name": server_name},
        )

    return mcp


def serve(manager: ConfigurationManager | None = None) -> None:
    """Run the server on stdio until the client disconnects."""
    server = create_server(manager)
    logger.info(f"{SERVER_NAME} running on stdio")
    server.run()
