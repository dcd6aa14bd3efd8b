"""Polars expressions over catalog fields.

Multi-value splitting and expansion, duration and date parsing,
case-insensitive matching and missing-value detection. Every helper
returns a new expression or frame; input frames are never modified.
"""

import polars as pl

from src.catalog.types import DATE_ADDED_FORMAT, MULTI_VALUE_SEPARATOR

# =============================================================================
# MULTI-VALUE FIELDS
# =============================================================================


def split_multi_value(column: str) -> pl.Expr:
    """Split a delimited field into a list of trimmed, non-empty values.

    Args:
        column: Name of a comma-separated column.

    Returns:
        List[String] expression (null for a null field).
    """
    return (
        pl.col(column)
        .str.split(MULTI_VALUE_SEPARATOR)
        .list.eval(
            pl.element()
            .str.strip_chars()
            .filter(pl.element().str.strip_chars().str.len_chars() > 0)
        )
    )


def expand(frame: pl.DataFrame, column: str, alias: str) -> pl.DataFrame:
    """Produce one row per element of a multi-value field.

    All other columns are repeated unchanged on every expanded row.
    Rows whose field is null or holds no element produce no rows.

    Args:
        frame: Catalog frame.
        column: Multi-value column to expand.
        alias: Name of the column holding the single element.

    Returns:
        Expanded frame.
    """
    return (
        frame.with_columns(split_multi_value(column).alias(alias))
        .explode(alias)
        .filter(pl.col(alias).is_not_null())
    )


# =============================================================================
# DURATION AND DATES
# =============================================================================


def duration_value(column: str = "duration") -> pl.Expr:
    """Leading integer of a duration ("90 min" -> 90, "3 Seasons" -> 3).

    The token before the first space is parsed as an integer; anything
    that is not numeric yields null.

    Args:
        column: Duration column.

    Returns:
        Int64 expression.
    """
    return (
        pl.col(column)
        .str.strip_chars()
        .str.split(" ")
        .list.first()
        .cast(pl.Int64, strict=False)
    )


def date_added_value(column: str = "date_added") -> pl.Expr:
    """Parse "Month DD, YYYY" dates, null when the text does not match."""
    return (
        pl.col(column)
        .str.strip_chars()
        .str.strptime(pl.Date, DATE_ADDED_FORMAT, strict=False)
    )


# =============================================================================
# MATCHING
# =============================================================================


def contains_ci(column: str, text: str) -> pl.Expr:
    """Case-insensitive substring test; null fields never match.

    Args:
        column: String column to search.
        text: Literal text to look for.

    Returns:
        Boolean expression.
    """
    return (
        pl.col(column)
        .str.to_lowercase()
        .str.contains(text.lower(), literal=True)
        .fill_null(False)
    )


def is_missing(column: str) -> pl.Expr:
    """True when the field is null or blank."""
    return pl.col(column).is_null() | (pl.col(column).str.strip_chars() == "")
