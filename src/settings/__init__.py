"""Centralized configuration for the catalog reports project.

Every setting has a safe default and can be overridden from environment
variables or the .env file.

Usage:
    from src.settings import settings

    # Access sub-settings
    settings.catalog.csv_path
    settings.reports.output_format
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.settings.base import LoggingSettings, PathsSettings
from src.settings.reports import OUTPUT_FORMATS, ReportSettings
from src.settings.sources import CatalogSettings

__all__ = [
    # Main
    "Settings",
    "settings",
    # Base
    "PathsSettings",
    "LoggingSettings",
    # Sources
    "CatalogSettings",
    # Reports
    "ReportSettings",
    "OUTPUT_FORMATS",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from src.settings import settings`

    Attributes:
        debug: Forces DEBUG level on every logger, whatever LOG_LEVEL says.
    """

    debug: bool = Field(default=False, alias="DEBUG")

    # Paths and logging
    paths: PathsSettings = Field(default_factory=PathsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Catalog source and reports
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    reports: ReportSettings = Field(default_factory=ReportSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def model_post_init(self, _: Any) -> None:
        """Initialize directories after settings are loaded."""
        self.paths.ensure_directories()


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()
