"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_int, require_env_vars
from .errors import ConfigurationError, DestinationExistsError, MissingConfigurationError
from .logging import configure_logging
from .source import DEFAULT_SOURCE_QUERY, DEFAULT_TAXONOMY_REF, SourceConfig, get_source_config
from .storage import sqlite_uri

__all__ = [
    "DEFAULT_SOURCE_QUERY",
    "DEFAULT_TAXONOMY_REF",
    "ConfigurationError",
    "DestinationExistsError",
    "MissingConfigurationError",
    "SourceConfig",
    "configure_logging",
    "get_source_config",
    "optional_env_int",
    "require_env_vars",
    "sqlite_uri",
]
