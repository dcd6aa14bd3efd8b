"""Catalog loader for the Netflix titles CSV.

Reads and validates the catalog export using Polars and returns
an immutable, normalized DataFrame ready for the report engine.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Final

import polars as pl

from src.catalog.errors import InputFormatError, MissingDataError
from src.catalog.types import (
    COLUMNS,
    CONTENT_TYPES,
    HEADER_ALIASES,
    MOVIE,
    REQUIRED_COLUMNS,
    TV_SHOW,
    TYPE_ALIASES,
    ContentRecord,
    LoadStats,
)
from src.settings import settings
from src.utils import setup_logger

NULL_VALUES: Final[list[str]] = ["", "NA", "N/A", "null", "None"]

STRING_SCHEMA: Final[dict[str, pl.DataType]] = {column: pl.String() for column in COLUMNS}


class CatalogLoader:
    """Loads the content catalog into a Polars DataFrame.

    The whole file is read once; every column is read as text and then
    normalized (whitespace trimmed, blanks turned into nulls, content
    types unified, release_year cast to Int64). Any malformed row makes
    the load fail before a report can run.

    Attributes:
        stats: Statistics of the last load.
    """

    def __init__(self) -> None:
        """Initialize catalog loader."""
        self.logger = setup_logger("catalog.loader")
        self.cfg = settings.catalog
        self.stats = LoadStats()

    # -------------------------------------------------------------------------
    # Entry Points
    # -------------------------------------------------------------------------

    def load(self, csv_path: Path | str | None = None) -> pl.DataFrame:
        """Read and validate the catalog CSV.

        Args:
            csv_path: Path to the CSV file. Defaults to settings.catalog.csv_path.

        Returns:
            Normalized catalog DataFrame.

        Raises:
            InputFormatError: If the file is missing, unreadable or malformed.
        """
        path = Path(csv_path) if csv_path else self.cfg.csv_path

        if not path.exists():
            raise InputFormatError(f"Catalog file not found: {path}")

        self.logger.info(f"loading_csv: {path.name}")
        raw = self._read_csv(path)
        return self._prepare(raw)

    def from_records(self, records: Iterable[ContentRecord]) -> pl.DataFrame:
        """Build a catalog from in-memory records.

        Records go through the same normalization and validation as
        CSV rows. Optional keys may be omitted.

        Args:
            records: Content records.

        Returns:
            Normalized catalog DataFrame.
        """
        rows = [
            {column: _to_text(record.get(column)) for column in COLUMNS}
            for record in records
        ]
        raw = pl.DataFrame(rows, schema=STRING_SCHEMA)
        return self._prepare(raw)

    # -------------------------------------------------------------------------
    # CSV Reading
    # -------------------------------------------------------------------------

    def _read_csv(self, path: Path) -> pl.DataFrame:
        """Read CSV file with Polars, every column as text.

        Args:
            path: Path to CSV file.

        Returns:
            Raw Polars DataFrame.

        Raises:
            InputFormatError: If Polars cannot parse the file.
        """
        try:
            return pl.read_csv(
                path,
                infer_schema=False,
                separator=self.cfg.separator,
                encoding=self.cfg.encoding,
                null_values=NULL_VALUES,
                raise_if_empty=True,
            )
        except pl.exceptions.PolarsError as e:
            raise InputFormatError(f"Cannot read catalog CSV {path}: {e}") from e

    # -------------------------------------------------------------------------
    # Normalization & Validation
    # -------------------------------------------------------------------------

    def _prepare(self, raw: pl.DataFrame) -> pl.DataFrame:
        """Normalize and validate a raw frame.

        Args:
            raw: Frame with text columns.

        Returns:
            Validated catalog frame with columns in canonical order.
        """
        frame = self._select_columns(raw)
        frame = self._normalize(frame)
        frame = self._validate(frame)
        self._record_stats(frame)
        return frame

    def _select_columns(self, raw: pl.DataFrame) -> pl.DataFrame:
        """Rename header aliases, check presence and drop extra columns.

        Raises:
            InputFormatError: If expected columns are absent.
        """
        renames = {
            header: column
            for header, column in HEADER_ALIASES.items()
            if header in raw.columns and column not in raw.columns
        }
        frame = raw.rename(renames)

        missing = [column for column in COLUMNS if column not in frame.columns]
        if missing:
            raise InputFormatError(f"Missing columns in catalog header: {missing}")

        extra = [column for column in frame.columns if column not in COLUMNS]
        self.stats.extra_columns_dropped = len(extra)
        if extra:
            self.logger.warning(f"extra_columns_dropped: {extra}")

        return frame.select(COLUMNS)

    @staticmethod
    def _normalize(frame: pl.DataFrame) -> pl.DataFrame:
        """Trim text, turn blanks into nulls and unify content types."""
        frame = frame.with_columns(
            [pl.col(column).cast(pl.String).str.strip_chars() for column in COLUMNS]
        )
        frame = frame.with_columns(
            [
                pl.when(pl.col(column).str.len_chars() == 0)
                .then(None)
                .otherwise(pl.col(column))
                .alias(column)
                for column in COLUMNS
            ]
        )
        return frame.with_columns(
            pl.col("type").replace(TYPE_ALIASES),
            pl.col("release_year").cast(pl.Int64, strict=False).alias("_release_year"),
        )

    def _validate(self, frame: pl.DataFrame) -> pl.DataFrame:
        """Reject frames with missing, malformed or duplicated rows.

        Raises:
            MissingDataError: If a required field is null.
            InputFormatError: If release_year or type is malformed,
                or show_id is not unique.
        """
        for column in sorted(REQUIRED_COLUMNS):
            bad = frame.filter(pl.col(column).is_null())
            if bad.height:
                raise MissingDataError(column, bad["show_id"].to_list())

        bad_years = frame.filter(pl.col("_release_year").is_null())
        if bad_years.height:
            raise InputFormatError(
                f"Non-integer release_year for show_id(s): {bad_years['show_id'].to_list()[:5]}"
            )

        bad_types = frame.filter(~pl.col("type").is_in(sorted(CONTENT_TYPES)))
        if bad_types.height:
            values = sorted(bad_types["type"].unique().to_list())
            raise InputFormatError(f"Unknown content type(s): {values}")

        duplicates = frame.filter(pl.col("show_id").is_duplicated())
        if duplicates.height:
            ids = sorted(duplicates["show_id"].unique().to_list())
            raise InputFormatError(f"Duplicated show_id(s): {ids[:5]}")

        return frame.with_columns(pl.col("_release_year").alias("release_year")).drop("_release_year")

    def _record_stats(self, frame: pl.DataFrame) -> None:
        """Update and log load statistics."""
        self.stats.rows_read = frame.height
        self.stats.movies = frame.filter(pl.col("type") == MOVIE).height
        self.stats.tv_shows = frame.filter(pl.col("type") == TV_SHOW).height

        self.logger.info(
            f"catalog_loaded: {self.stats.rows_read} rows "
            f"({self.stats.movies} movies, {self.stats.tv_shows} tv shows)"
        )


def _to_text(value: object) -> str | None:
    """Convert a record value to text for the raw frame."""
    if value is None:
        return None
    return str(value)
