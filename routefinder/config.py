"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RF_GRAPH_DATA_DIR=/path/to/data
- RF_GRAPH_GRAPH_FILE=network.json
- RF_LOG_LEVEL=DEBUG
- RF_INDENT=2
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph and journey data configuration.

    Environment variables prefixed with RF_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_GRAPH_")

    data_dir: Path = Field(default_factory=Path.cwd)
    graph_file: str = "graph.json"
    journeys_file: str = "journeys.json"

    @property
    def graph_path(self) -> Path:
        """Full path to the graph JSON file."""
        return self.data_dir / self.graph_file

    @property
    def journeys_path(self) -> Path:
        """Full path to the journeys JSON file."""
        return self.data_dir / self.journeys_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.graph_path)
        print(config.observability.level)

    Environment variables prefixed with RF_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    # Indentation of the JSON output, None for a single line
    indent: Optional[int] = Field(default=None, ge=0)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
