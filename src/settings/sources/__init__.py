"""Data source settings.

Exports configuration classes for the catalog CSV source.
"""

from src.settings.sources.catalog import CatalogSettings

__all__ = [
    "CatalogSettings",
]
