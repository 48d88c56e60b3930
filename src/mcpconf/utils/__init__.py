# ABOUTME: Utility modules for mcpconf
# ABOUTME: Exports backup functions

from mcpconf.utils.backup import cleanup_old_backups, create_backup, get_backup_dir

__all__ = [
    "cleanup_old_backups",
    "create_backup",
    "get_backup_dir",
]
