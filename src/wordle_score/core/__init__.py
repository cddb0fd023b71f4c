"""Core module for wordle-score configuration and shared types.

This module provides:
- Configuration models and singleton access via get_config()
- Custom exception hierarchy with WordleScoreError as base
- The Box enum and glyph normalization table
"""

from wordle_score.core.config import (
    DEFAULT_CONFIG_PATH,
    Config,
    LoggingConfig,
    ServerConfig,
    get_config,
    load_config,
)
from wordle_score.core.exceptions import (
    ConfigError,
    InvalidFormatError,
    ServerError,
    WordleScoreError,
)
from wordle_score.core.types import GLYPH_TABLE, Box, normalize_glyph

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "Config",
    "LoggingConfig",
    "ServerConfig",
    "get_config",
    "load_config",
    "ConfigError",
    "InvalidFormatError",
    "ServerError",
    "WordleScoreError",
    "GLYPH_TABLE",
    "Box",
    "normalize_glyph",
]
