"""Shared test fixtures."""

from pathlib import Path

import pytest
from markline.config import Config, DocsConfig, LiveReloadConfig, ServerConfig


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration with tmp_path directories.

    Creates source_dir and returns a Config instance suitable for testing.
    Live reload is disabled so no file watcher is started.
    """
    source_dir = tmp_path / "docs"
    source_dir.mkdir(exist_ok=True)
    cache_dir = tmp_path / ".cache"

    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=source_dir, cache_dir=cache_dir),
        live_reload=LiveReloadConfig(enabled=False),
    )
