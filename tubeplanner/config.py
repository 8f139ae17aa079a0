"""Centralized configuration using Pydantic Settings.

Defaults point at the network dataset bundled with the package, so
nothing needs to be set for normal use. Configuration can be
overridden via environment variables:
- TUBEPLANNER_GRAPH_DATA_DIR=/path/to/data
- TUBEPLANNER_GRAPH_RAIL_LINKS_FILE=rail_links.csv
- TUBEPLANNER_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Network dataset configuration.

    Environment variables prefixed with TUBEPLANNER_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TUBEPLANNER_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    rail_links_file: str = "rail_links.csv"
    interchanges_file: str = "interchanges.csv"

    @property
    def rail_links_path(self) -> Path:
        """Full path to the rail links CSV file."""
        return self.data_dir / self.rail_links_file

    @property
    def interchanges_path(self) -> Path:
        """Full path to the interchanges CSV file."""
        return self.data_dir / self.interchanges_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TUBEPLANNER_LOG_. Logs go to
    stderr; the default level keeps them out of normal CLI runs.
    """

    model_config = SettingsConfigDict(env_prefix="TUBEPLANNER_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.rail_links_path)

    Environment variables prefixed with TUBEPLANNER_.
    """

    model_config = SettingsConfigDict(env_prefix="TUBEPLANNER_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
