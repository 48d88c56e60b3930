# ABOUTME: Tests for timestamped config backups and per-client retention
import re
from pathlib import Path

import pytest

from mcpconf.settings import BACKUP_DIR
from mcpconf.utils.backup import cleanup_old_backups, create_backup, get_backup_dir


class TestCreateBackup:
    """Tests for create_backup function."""

    def test_creates_backup_file(self, tmp_path: Path) -> None:
        source = tmp_path / "claude_desktop_config.json"
        source.write_text("{}")
        backup_dir = tmp_path / "backups"

        backup_path = create_backup(source, backup_dir, "claude")

        assert backup_path.exists()
        assert backup_path.parent == backup_dir

    def test_backup_preserves_content(self, tmp_path: Path) -> None:
        source = tmp_path / "mcp.json"
        original_content = '{"mcpServers": {"test": {"command": "node"}}}'
        source.write_text(original_content)

        backup_path = create_backup(source, tmp_path / "backups", "cursor")

        assert backup_path.read_text() == original_content

    def test_backup_filename_uses_label(self, tmp_path: Path) -> None:
        """Filename follows {label}_{YYYYMMDD}_{HHMMSS}.{ext}."""
        source = tmp_path / "cline_mcp_settings.json"
        source.write_text("{}")

        backup_path = create_backup(source, tmp_path / "backups", "roo_code")

        assert re.match(r"^roo_code_\d{8}_\d{6}\.json$", backup_path.name)

    def test_label_defaults_to_filename_prefix(self, tmp_path: Path) -> None:
        source = tmp_path / "claude_desktop_config.json"
        source.write_text("{}")

        backup_path = create_backup(source, tmp_path / "backups")

        assert re.match(r"^claude_\d{8}_\d{6}\.json$", backup_path.name)

    def test_creates_backup_dir_if_missing(self, tmp_path: Path) -> None:
        source = tmp_path / "mcp_config.json"
        source.write_text("{}")
        backup_dir = tmp_path / "new_backups" / "nested"

        backup_path = create_backup(source, backup_dir, "windsurf")

        assert backup_dir.is_dir()
        assert backup_path.exists()

    def test_source_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            create_backup(tmp_path / "nonexistent.json", tmp_path / "backups", "claude")

    def test_create_backup_triggers_cleanup(self, tmp_path: Path) -> None:
        backup_dir = tmp_path / "backups"
        backup_dir.mkdir()
        for i in range(5):
            (backup_dir / f"cursor_20260101_00000{i}.json").write_text("{}")

        source = tmp_path / "mcp.json"
        source.write_text("{}")
        create_backup(source, backup_dir, "cursor")

        remaining = list(backup_dir.glob("cursor_*.json"))
        assert len(remaining) == 5
        assert not (backup_dir / "cursor_20260101_000000.json").exists()


class TestGetBackupDir:
    """Tests for get_backup_dir function."""

    def test_returns_configured_dir(self) -> None:
        assert get_backup_dir() == BACKUP_DIR

    def test_under_app_dir(self) -> None:
        assert get_backup_dir().name == "backups"
        assert get_backup_dir().parent.name == ".mcpconf"


class TestCleanupOldBackups:
    """Tests for cleanup_old_backups function."""

    def test_missing_dir(self, tmp_path: Path) -> None:
        assert cleanup_old_backups(tmp_path / "nope") == []

    def test_keeps_newest_five(self, tmp_path: Path) -> None:
        backup_dir = tmp_path / "backups"
        backup_dir.mkdir()
        for hour in range(10, 17):
            (backup_dir / f"claude_20260101_{hour}0000.json").write_text("{}")

        deleted = cleanup_old_backups(backup_dir)

        assert sorted(p.name for p in deleted) == [
            "claude_20260101_100000.json",
            "claude_20260101_110000.json",
        ]
        remaining = sorted(p.name for p in backup_dir.glob("claude_*.json"))
        assert remaining[0] == "claude_20260101_120000.json"
        assert remaining[-1] == "claude_20260101_160000.json"

    def test_labels_handled_independently(self, tmp_path: Path) -> None:
        """Labels containing underscores group by their full prefix."""
        backup_dir = tmp_path / "backups"
        backup_dir.mkdir()
        for i in range(7):
            (backup_dir / f"roo_code_20260101_00000{i}.json").write_text("{}")
        for i in range(3):
            (backup_dir / f"cline_20260101_00000{i}.json").write_text("{}")

        deleted = cleanup_old_backups(backup_dir)

        assert len(deleted) == 2
        assert all(p.name.startswith("roo_code_") for p in deleted)
        assert len(list(backup_dir.glob("roo_code_*.json"))) == 5
        assert len(list(backup_dir.glob("cline_*.json"))) == 3

    def test_ignores_non_matching_files(self, tmp_path: Path) -> None:
        backup_dir = tmp_path / "backups"
        backup_dir.mkdir()
        (backup_dir / "readme.txt").write_text("readme")
        (backup_dir / "claude.json").write_text("{}")
        for i in range(3):
            (backup_dir / f"claude_20260101_00000{i}.json").write_text("{}")

        assert cleanup_old_backups(backup_dir) == []
        assert (backup_dir / "readme.txt").exists()
        assert (backup_dir / "claude.json").exists()

    def test_respects_custom_max_backups(self, tmp_path: Path) -> None:
        backup_dir = tmp_path / "backups"
        backup_dir.mkdir()
        for i in range(5):
            (backup_dir / f"claude_20260101_00000{i}.json").write_text("{}")

        deleted = cleanup_old_backups(backup_dir, max_backups_per_label=2)

        assert len(deleted) == 3
        assert len(list(backup_dir.glob("claude_*.json"))) == 2

    def test_ignores_directories(self, tmp_path: Path) -> None:
        backup_dir = tmp_path / "backups"
        subdir = backup_dir / "claude_20260101_000000.json"
        subdir.mkdir(parents=True)

        assert cleanup_old_backups(backup_dir) == []
        assert subdir.exists()
