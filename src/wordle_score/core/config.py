"""Configuration models and loading for wordle-score.

Configuration is optional. Without a file every setting takes its default;
a YAML file can override them, and a few environment variables override the
file so the app can run behind a process manager that only sets ``PORT``.

Usage:
    from wordle_score.core.config import get_config, load_config

    load_config(Path("wordle-score.yaml"))
    config = get_config()
    print(config.server.port)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wordle_score.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("wordle-score.yaml")

ENV_PORT = "PORT"
ENV_HOST = "WORDLE_SCORE_HOST"

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


class ServerConfig(BaseModel):
    """HTTP server settings.

    Attributes:
        host: Address to bind the server to.
        port: Port to bind the server to.
        log_level: Uvicorn log level.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = Field(default="127.0.0.1", description="Address to bind server to")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to bind server to")
    log_level: LogLevel = Field(default="info", description="Uvicorn log level")

    @field_validator("log_level", mode="before")
    @classmethod
    def lowercase_log_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        return v.lower() if isinstance(v, str) else v


class LoggingConfig(BaseModel):
    """Application logging settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = Field(default="INFO", description="Root log level for wordle_score loggers")

    @field_validator("level", mode="after")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate that level is a stdlib logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class Config(BaseModel):
    """Top-level wordle-score configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Module-level singleton (None = not loaded yet)
_config: Config | None = None


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay environment variables onto raw config data.

    Args:
        data: Raw config dict as loaded from YAML.

    Returns:
        New dict with environment overrides applied.

    """
    server = dict(data.get("server") or {})

    port = os.environ.get(ENV_PORT)
    if port:
        server["port"] = port
        logger.debug("Using port %s from $%s", port, ENV_PORT)

    host = os.environ.get(ENV_HOST)
    if host:
        server["host"] = host
        logger.debug("Using host %s from $%s", host, ENV_HOST)

    if not server:
        return data
    return {**data, "server": server}


def load_config(path: Path | None = None) -> Config:
    """Load configuration from YAML and populate the singleton.

    A missing file is not an error: defaults (plus environment overrides)
    are used instead.

    Args:
        path: Path to the YAML file. Defaults to ./wordle-score.yaml.

    Returns:
        Validated Config instance.

    Raises:
        ConfigError: If the file is unreadable, not valid YAML, not a
            mapping, or fails validation.

    """
    global _config

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    data: dict[str, Any] = {}

    if config_path.is_file():
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read config {config_path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(
                f"Config {config_path} must be a mapping, got {type(raw).__name__}"
            )
        data = raw
        logger.debug("Loaded config from %s", config_path)
    elif path is not None:
        logger.info("Config file %s not found, using defaults", config_path)

    try:
        config = Config.model_validate(_apply_env_overrides(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e

    _config = config
    return config


def get_config() -> Config:
    """Return the loaded config, loading defaults on first use.

    Returns:
        The Config singleton.

    """
    if _config is None:
        return load_config()
    return _config


def _reset_config() -> None:
    """Clear the config singleton (test isolation)."""
    global _config
    _config = None
