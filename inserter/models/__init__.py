"""Models for the inserter grouping engine."""

from inserter.models.model_capabilities import (
    ChildNameLookup,
    HoverSink,
    ItemSource,
    ItemSourceResult,
    SelectHandler,
)
from inserter.models.model_display import DisplayGroup, GroupKind
from inserter.models.model_item import Category, Collection, Item
from inserter.models.model_storage import CatalogFile

__all__ = [
    # Catalog / taxonomy
    "Category",
    "Collection",
    "Item",
    # Storage
    "CatalogFile",
    # Output
    "DisplayGroup",
    "GroupKind",
    # Capabilities
    "ChildNameLookup",
    "HoverSink",
    "ItemSource",
    "ItemSourceResult",
    "SelectHandler",
]
