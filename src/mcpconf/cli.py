# CLI interface for mcpconf
import argparse
import json
import logging
import sys
from pathlib import Path

from mcpconf import __version__
from mcpconf.dispatcher import call_tool
from mcpconf.errors import ConfigurationError
from mcpconf.models import SUPPORTED_CLIENTS, SUPPORTED_PLATFORMS
from mcpconf.operations import ConfigurationManager
from mcpconf.settings import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVELS
from mcpconf.utils.backup import get_backup_dir

# ABOUTME: Exit codes
# 0 = success, 2 = config error, 3 = fatal
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_FATAL = 3

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout belongs to the MCP transport."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, stream=sys.stderr)


def build_manager(args: argparse.Namespace) -> ConfigurationManager:
    """Create the operation surface from global CLI options."""
    return ConfigurationManager(
        platform=args.platform,
        home=args.home,
        backup_dir=get_backup_dir() if args.backup else None,
    )


def _run(args: argparse.Namespace, tool: str, arguments: dict[str, object]) -> int:
    """Call one tool and print its text result.

    ABOUTME: ConfigurationError -> EXIT_CONFIG_ERROR, anything else -> EXIT_FATAL
    """
    try:
        print(call_tool(build_manager(args), tool, arguments))
        return EXIT_SUCCESS
    except ConfigurationError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return EXIT_FATAL


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the MCP server on stdio."""
    from mcpconf.server import serve

    try:
        serve(build_manager(args))
    except KeyboardInterrupt:
        pass
    return EXIT_SUCCESS


def cmd_path(args: argparse.Namespace) -> int:
    return _run(args, "get_configuration_path", {"client": args.client})


def cmd_show(args: argparse.Namespace) -> int:
    return _run(args, "get_configuration", {"client": args.client})


def cmd_list(args: argparse.Namespace) -> int:
    return _run(args, "list_servers", {"client": args.client})


def cmd_get(args: argparse.Namespace) -> int:
    return _run(
        args,
        "get_server_configuration",
        {"client": args.client, "server_name": args.name},
    )


def cmd_add(args: argparse.Namespace) -> int:
    """Execute add command.

    ABOUTME: Server JSON comes from --json or --file
    ABOUTME: Refuses to replace an existing server unless --allow-override
    """
    try:
        if args.file:
            raw = Path(args.file).read_text(encoding="utf-8")
        else:
            raw = args.json
        entry = json.loads(raw)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except json.JSONDecodeError as e:
        print(f"Error: server configuration is not valid JSON: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    return _run(
        args,
        "add_server_configuration",
        {
            "client": args.client,
            "server_name": args.name,
            "json_config": entry,
            "allow_override": args.allow_override,
        },
    )


def cmd_remove(args: argparse.Namespace) -> int:
    return _run(
        args,
        "remove_server_configuration",
        {"client": args.client, "server_name": args.name},
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcpconf",
        description="Inspect and edit MCP server configuration of AI clients"
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"mcpconf v{__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level, written to stderr (default: {DEFAULT_LOG_LEVEL})"
    )
    parser.add_argument(
        "--backup",
        action="store_true",
        help="Back up config files to ~/.mcpconf/backups before overwriting them"
    )
    parser.add_argument(
        "--platform",
        choices=SUPPORTED_PLATFORMS,
        help="Use this platform's file layout instead of detecting it"
    )
    parser.add_argument(
        "--home",
        help="Home directory to resolve config paths under (default: current user's)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("serve", help="Run the MCP server on stdio")

    client_help = "Client name"
    for command, help_text in (
        ("path", "Print a client's config file path"),
        ("show", "Print a client's whole configuration"),
        ("list", "List server names configured for a client"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("client", choices=SUPPORTED_CLIENTS, help=client_help)

    get_parser = subparsers.add_parser("get", help="Print one server's configuration")
    get_parser.add_argument("client", choices=SUPPORTED_CLIENTS, help=client_help)
    get_parser.add_argument("name", help="Server name")

    add_parser = subparsers.add_parser("add", help="Add a server configuration to a client")
    add_parser.add_argument("client", choices=SUPPORTED_CLIENTS, help=client_help)
    add_parser.add_argument("name", help="Server name")
    source = add_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--json", help="Server configuration as a JSON object")
    source.add_argument("--file", help="File containing the server configuration JSON")
    add_parser.add_argument(
        "--allow-override",
        action="store_true",
        help="Replace an existing server with the same name"
    )

    remove_parser = subparsers.add_parser("remove", help="Remove a server configuration from a client")
    remove_parser.add_argument("client", choices=SUPPORTED_CLIENTS, help=client_help)
    remove_parser.add_argument("name", help="Server name")

    return parser


COMMANDS = {
    "serve": cmd_serve,
    "path": cmd_path,
    "show": cmd_show,
    "list": cmd_list,
    "get": cmd_get,
    "add": cmd_add,
    "remove": cmd_remove,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    ABOUTME: Parses args and dispatches to appropriate command
    ABOUTME: Returns exit code for sys.exit()
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    handler = COMMANDS.get(args.command)
    if handler is None:
        # No command specified, show help
        parser.print_help()
        return EXIT_SUCCESS
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
