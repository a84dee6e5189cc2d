"""Pytest configuration and fixtures."""

import pytest

from inserter.models.model_item import Category, Collection, Item
from inserter.models.model_storage import CatalogFile


@pytest.fixture
def sample_items() -> list[Item]:
    """Small catalog covering categorized, uncategorized and third-party blocks."""
    return [
        Item(name="core/paragraph", category="text", frecency=3, title="Paragraph"),
        Item(name="core/image", category="media", frecency=5, title="Image"),
        Item(name="core/quote", category="text", frecency=1, title="Quote"),
        Item(name="core/embed", frecency=0, title="Embed"),
        Item(name="acme/widget", category="text", frecency=2, title="Widget"),
    ]


@pytest.fixture
def sample_categories() -> list[Category]:
    """Category registry; media is registered before text."""
    return [
        Category(slug="media", title="Media", icon="format-image"),
        Category(slug="text", title="Text", icon="editor-paragraph"),
    ]


@pytest.fixture
def sample_collections() -> dict[str, Collection]:
    """Collection registry with one third-party namespace."""
    return {"acme": Collection(title="Acme Blocks", icon="star-filled")}


@pytest.fixture
def sample_catalog(sample_items, sample_categories, sample_collections) -> CatalogFile:
    """Catalog document with a columns block that only accepts columns."""
    return CatalogFile(
        items=[
            *sample_items,
            Item(name="core/column", category="design", frecency=4, title="Column"),
            Item(name="core/block", category="reusable", frecency=9, title="Reusable"),
        ],
        categories=[
            *sample_categories,
            Category(slug="design", title="Design"),
            Category(slug="reusable", title="Reusable"),
        ],
        collections=sample_collections,
        child_blocks={"core/columns": ["core/column"]},
        contexts={"block-1": "core/columns", "block-2": "core/group"},
    )
