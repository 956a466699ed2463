"""Tests for configuration module."""

from pathlib import Path

import pytest
from markline.config import (
    CONFIG_FILENAME,
    Config,
    DocsConfig,
    LiveReloadConfig,
    ServerConfig,
)


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_file(self, tmp_path: Path) -> None:
        """Load configuration from an explicit path."""
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            """
[server]
host = "0.0.0.0"
port = 9000

[docs]
source_dir = "content"
cache_dir = "build/cache"
cache_enabled = false

[live_reload]
enabled = false
watch_patterns = ["**/*.md", "**/*.txt"]
""",
        )

        config = Config.load(config_file)

        assert config.server == ServerConfig(host="0.0.0.0", port=9000)
        assert config.docs.source_dir == tmp_path / "content"
        assert config.docs.cache_dir == tmp_path / "build" / "cache"
        assert config.docs.cache_enabled is False
        assert config.live_reload.enabled is False
        assert config.live_reload.watch_patterns == ["**/*.md", "**/*.txt"]
        assert config.config_path == config_file

    def test__explicit_path_missing__raises_file_not_found(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for a missing explicit path."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "missing.toml")

    def test__empty_file__uses_defaults_relative_to_file(self, tmp_path: Path) -> None:
        """Fill missing sections with defaults."""
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server == ServerConfig()
        assert config.docs.source_dir == tmp_path / "docs"
        assert config.docs.cache_dir == tmp_path / ".cache"
        assert config.docs.cache_enabled is True
        assert config.live_reload == LiveReloadConfig()

    def test__discovery__finds_config_in_parent(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Search parent directories for markline.toml."""
        (tmp_path / CONFIG_FILENAME).write_text("[server]\nport = 7000\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Config.load()

        assert config.server.port == 7000
        assert config.config_path == tmp_path / CONFIG_FILENAME

    def test__no_config_found__returns_defaults(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Return defaults when discovery finds nothing."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(Config, "_discover_config", classmethod(lambda cls: None))

        config = Config.load()

        assert config.config_path is None
        assert config.docs == DocsConfig()

    def test__invalid_toml__raises_value_error(self, tmp_path: Path) -> None:
        """Report TOML syntax errors as ValueError."""
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[server\n")

        with pytest.raises(ValueError, match="Invalid TOML"):
            Config.load(config_file)


class TestConfigValidation:
    """Tests for configuration value validation."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ("[server]\nhost = 1", "server.host must be a string"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nport = true", "server.port must be an integer"),
            ("docs = 1", "docs section must be a dictionary"),
            ("[docs]\nsource_dir = 1", "docs.source_dir must be a string"),
            ("[docs]\ncache_dir = false", "docs.cache_dir must be a string"),
            ('[docs]\ncache_enabled = "yes"', "docs.cache_enabled must be a boolean"),
            ("live_reload = []", "live_reload section must be a dictionary"),
            ("[live_reload]\nenabled = 1", "live_reload.enabled must be a boolean"),
            ('[live_reload]\nwatch_patterns = "*.md"', "live_reload.watch_patterns must be a list"),
            ("[live_reload]\nwatch_patterns = [1]", "live_reload.watch_patterns items must be strings"),
        ],
    )
    def test__invalid_value__raises_value_error(
        self,
        tmp_path: Path,
        content: str,
        message: str,
    ) -> None:
        """Name the offending key in the error."""
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    def test__no_overrides__returns_equal_config(self, test_config: Config) -> None:
        """Keep all values when nothing is overridden."""
        assert test_config.with_overrides() == test_config

    def test__overrides__applied_without_mutating_original(
        self,
        test_config: Config,
        tmp_path: Path,
    ) -> None:
        """Apply non-None overrides to a copy."""
        result = test_config.with_overrides(
            host="0.0.0.0",
            port=9999,
            source_dir=tmp_path / "other",
            cache_enabled=False,
            live_reload_enabled=True,
        )

        assert result.server == ServerConfig(host="0.0.0.0", port=9999)
        assert result.docs.source_dir == tmp_path / "other"
        assert result.docs.cache_dir == test_config.docs.cache_dir
        assert result.docs.cache_enabled is False
        assert result.live_reload.enabled is True
        assert test_config.server == ServerConfig()
        assert test_config.live_reload.enabled is False

    def test__port_only__keeps_host(self, test_config: Config) -> None:
        """Override a single server value."""
        result = test_config.with_overrides(port=1234)

        assert result.server.host == test_config.server.host
        assert result.server.port == 1234
