# Application settings for mcpconf
from pathlib import Path

# ABOUTME: Server name advertised to MCP clients
SERVER_NAME = "mcp-client-configuration-server"

# ABOUTME: Per-user application directory (backups live here)
APP_DIR = Path.home() / ".mcpconf"

# ABOUTME: Default backup location, only used when backups are enabled
BACKUP_DIR = APP_DIR / "backups"

# ABOUTME: Backups retained per client before the oldest are pruned
MAX_BACKUPS_PER_CLIENT = 5

# ABOUTME: Logging always goes to stderr; stdout carries the MCP stdio transport
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ABOUTME: Indentation of every JSON document we write or render
JSON_INDENT = 2
