"""Catalog data types.

TypedDict definitions and column constants for the content
catalog (one row per movie or TV show).
"""

from dataclasses import dataclass
from typing import Final, NotRequired, TypedDict

# =============================================================================
# CONTENT TYPES
# =============================================================================

MOVIE: Final[str] = "Movie"
TV_SHOW: Final[str] = "TV Show"

CONTENT_TYPES: Final[frozenset[str]] = frozenset({MOVIE, TV_SHOW})

# Raw spellings accepted for each content type.
TYPE_ALIASES: Final[dict[str, str]] = {
    "Movie": MOVIE,
    "TV Show": TV_SHOW,
    "TVShow": TV_SHOW,
}

# =============================================================================
# COLUMNS
# =============================================================================

COLUMNS: Final[tuple[str, ...]] = (
    "show_id",
    "type",
    "title",
    "director",
    "casts",
    "country",
    "date_added",
    "release_year",
    "rating",
    "duration",
    "listed_in",
    "description",
)

REQUIRED_COLUMNS: Final[frozenset[str]] = frozenset(
    {"show_id", "type", "title", "release_year"}
)

# CSV header -> column name
HEADER_ALIASES: Final[dict[str, str]] = {"cast": "casts"}

MULTI_VALUE_SEPARATOR: Final[str] = ","
DATE_ADDED_FORMAT: Final[str] = "%B %d, %Y"


class ContentRecord(TypedDict):
    """One catalog entry as read from the CSV export.

    Multi-value fields (director, casts, country, listed_in) hold
    comma-separated names.
    """

    show_id: str
    type: str
    title: str
    release_year: int
    director: NotRequired[str | None]
    casts: NotRequired[str | None]
    country: NotRequired[str | None]
    date_added: NotRequired[str | None]
    rating: NotRequired[str | None]
    duration: NotRequired[str | None]
    listed_in: NotRequired[str | None]
    description: NotRequired[str | None]


@dataclass
class LoadStats:
    """Catalog loading statistics."""

    rows_read: int = 0
    movies: int = 0
    tv_shows: int = 0
    extra_columns_dropped: int = 0
