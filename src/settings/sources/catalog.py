"""Catalog dataset configuration settings.

Source: Kaggle "Netflix Movies and TV Shows" CSV export.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Catalog CSV configuration.

    Attributes:
        csv_filename: File name looked up under data/raw/.
        explicit_path: Full path overriding csv_filename.
        separator: Field separator of the CSV file.
        encoding: File encoding passed to the CSV reader.
    """

    csv_filename: str = Field(
        default="netflix_titles.csv",
        alias="CATALOG_CSV_FILENAME",
    )
    explicit_path: str | None = Field(default=None, alias="CATALOG_CSV_PATH")
    separator: str = Field(default=",", alias="CATALOG_SEPARATOR")
    encoding: str = Field(default="utf8", alias="CATALOG_ENCODING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separator must be a single character."""
        if len(v) != 1:
            raise ValueError("CATALOG_SEPARATOR must be a single character")
        return v

    @property
    def csv_path(self) -> Path:
        """Path to the catalog CSV file."""
        if self.explicit_path:
            return Path(self.explicit_path)

        from src.settings.base import PathsSettings

        paths = PathsSettings()
        return paths.raw_dir / self.csv_filename
