# ABOUTME: Shared fixtures: a ConfigurationManager rooted in a temporary home directory
import json
from pathlib import Path
from typing import Any

import pytest

from mcpconf.operations import ConfigurationManager


@pytest.fixture
def home(tmp_path: Path) -> Path:
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    return home_dir


@pytest.fixture
def manager(home: Path) -> ConfigurationManager:
    """Manager using the macOS layout under a temporary home."""
    return ConfigurationManager(platform="macos", home=home)


@pytest.fixture
def write_config(manager: ConfigurationManager):
    """Write a raw document to a client's config path and return the path."""
    def _write(client: str, document: Any) -> Path:
        path = Path(manager.get_path(client))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write
