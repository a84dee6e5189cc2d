"""Catalog storage for hosting the inserter outside an editor.

This module provides:
- CatalogStore: JSON catalog file exposing item source and child-name lookup
- CatalogError: Raised when a catalog file cannot be loaded
"""

from inserter.storage.catalog_store import CatalogError, CatalogStore

__all__ = ["CatalogError", "CatalogStore"]
