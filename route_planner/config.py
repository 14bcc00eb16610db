"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, the default transport mode, export formatting and
logging.

Configuration can be overridden via environment variables:
- RP_ROUTING_DATA_DIR=/path/to/data
- RP_ROUTING_DEFAULT_MODE=rail
- RP_EXPORT_DELIMITER=";"
- RP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import TransportMode

ModeName = Literal["ship", "rail", "flight", "car", "bus", "tram"]


class RoutingConfig(BaseSettings):
    """Routing data configuration.

    Environment variables prefixed with RP_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_ROUTING_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    # Relative to data_dir; absolute paths are used as is.
    cities_file: Path = Path("cities.txt")
    links_file: Path = Path("links.txt")
    default_mode: ModeName = "rail"
    # Narrow each search to the bounding box of its two endpoints.
    use_bounding_filter: bool = False

    @property
    def cities_path(self) -> Path:
        """Full path to the cities file."""
        return self.data_dir / self.cities_file

    @property
    def links_path(self) -> Path:
        """Full path to the links file."""
        return self.data_dir / self.links_file

    @property
    def mode(self) -> TransportMode:
        return TransportMode.parse(self.default_mode)


class ExportConfig(BaseSettings):
    """Route export configuration.

    Environment variables prefixed with RP_EXPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_EXPORT_")

    delimiter: str = ","
    decimals: int = 2


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations are accessed via attributes:

        config = get_config()
        print(config.routing.links_path)
        print(config.observability.level)

    Environment variables prefixed with RP_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_")

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)


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
