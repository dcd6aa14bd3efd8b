"""Content catalog package: types, loading and field expressions.

Usage:
    from src.catalog import CatalogLoader

    catalog = CatalogLoader().load("data/raw/netflix_titles.csv")
"""

from src.catalog.errors import CatalogError, InputFormatError, MissingDataError, ParseError
from src.catalog.loader import CatalogLoader
from src.catalog.types import MOVIE, TV_SHOW, ContentRecord, LoadStats

__all__ = [
    "CatalogLoader",
    "ContentRecord",
    "LoadStats",
    "MOVIE",
    "TV_SHOW",
    # Errors
    "CatalogError",
    "InputFormatError",
    "MissingDataError",
    "ParseError",
]
