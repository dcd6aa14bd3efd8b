"""Catalog and report errors."""

from collections.abc import Sequence


class CatalogError(Exception):
    """Base class for all catalog errors."""


class InputFormatError(CatalogError):
    """Source file or row cannot be loaded into the catalog."""


class MissingDataError(InputFormatError):
    """A required field is null or empty in one or more rows.

    Optional fields (director, country, ...) never raise this; reports
    treat their absence as a category of its own.
    """

    def __init__(self, column: str, show_ids: Sequence[str | None]) -> None:
        self.column = column
        self.show_ids = list(show_ids)
        super().__init__(f"Missing required '{column}' in {len(self.show_ids)} row(s)")


class ParseError(CatalogError):
    """Field values do not match their expected textual pattern.

    Attributes:
        column: Column that failed to parse.
        show_ids: Identifiers of the offending rows.
    """

    def __init__(self, column: str, show_ids: Sequence[str]) -> None:
        self.column = column
        self.show_ids = list(show_ids)
        preview = ", ".join(self.show_ids[:5])
        super().__init__(
            f"Cannot parse '{column}' in {len(self.show_ids)} row(s): {preview}"
        )
