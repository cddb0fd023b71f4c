"""Tests for configuration loading.

Tests cover:
- Defaults without a config file
- YAML loading and validation
- ConfigError for malformed YAML, non-mapping documents and bad values
- Environment overrides ($PORT, $WORDLE_SCORE_HOST)
- Singleton behavior
"""

from pathlib import Path

import pytest

from wordle_score.core.config import (
    Config,
    _reset_config,
    get_config,
    load_config,
)
from wordle_score.core.exceptions import ConfigError


class TestDefaults:
    """Missing config files fall back to defaults."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nope.yaml")

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 3000
        assert config.server.log_level == "info"
        assert config.logging.level == "INFO"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config(config_file) == Config()


class TestYamlLoading:
    """Valid YAML overrides defaults."""

    def test_load_server_section(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            """
server:
  host: 0.0.0.0
  port: 8080
  log_level: WARNING
logging:
  level: debug
"""
        )
        config = load_config(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8080
        assert config.server.log_level == "warning"
        assert config.logging.level == "DEBUG"

    def test_malformed_yaml_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server: [unclosed")

        with pytest.raises(ConfigError, match="Failed to read config"):
            load_config(config_file)

    def test_non_mapping_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(config_file)

    def test_invalid_port_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 70000\n")

        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(config_file)

    def test_unknown_key_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("database:\n  url: sqlite://\n")

        with pytest.raises(ConfigError):
            load_config(config_file)

    def test_unknown_log_level_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: chatty\n")

        with pytest.raises(ConfigError):
            load_config(config_file)


class TestEnvOverrides:
    """Environment variables win over the file."""

    def test_port_env_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 8080\n")
        monkeypatch.setenv("PORT", "5050")

        assert load_config(config_file).server.port == 5050

    def test_host_env_without_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WORDLE_SCORE_HOST", "0.0.0.0")

        assert load_config(tmp_path / "missing.yaml").server.host == "0.0.0.0"

    def test_invalid_port_env_raises_config_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PORT", "not-a-port")

        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")


class TestSingleton:
    """get_config() returns the last loaded config."""

    def test_load_populates_singleton(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 4000\n")
        load_config(config_file)

        assert get_config().server.port == 4000

    def test_get_config_loads_defaults_lazily(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        _reset_config()

        assert get_config().server.port == 3000
