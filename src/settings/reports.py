"""Report engine configuration settings."""

from datetime import date

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OUTPUT_FORMATS = frozenset({"table", "csv", "json"})


class ReportSettings(BaseSettings):
    """Report generation configuration.

    Attributes:
        output_format: Default output format (table, csv, json).
        reference_date: Date used as "today" by relative-date reports.
            None means the current date.
        strict_parsing: Raise on unparseable duration/date values
            instead of skipping the rows.
    """

    output_format: str = Field(default="table", alias="REPORT_OUTPUT_FORMAT")
    reference_date: date | None = Field(default=None, alias="REPORT_REFERENCE_DATE")
    strict_parsing: bool = Field(default=False, alias="REPORT_STRICT_PARSING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format is supported."""
        v_lower = v.lower()
        if v_lower not in OUTPUT_FORMATS:
            raise ValueError(f"Invalid REPORT_OUTPUT_FORMAT. Valid: {sorted(OUTPUT_FORMATS)}")
        return v_lower
