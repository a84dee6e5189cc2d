"""On-disk catalog document."""

from pydantic import BaseModel, Field

from inserter.models.model_item import Category, Collection, Item


class CatalogFile(BaseModel):
    """Block catalog stored as JSON.

    Holds the registries the inserter reads from: block types, categories,
    collections, child block declarations and the blocks placed in each
    insertion context.
    """

    items: list[Item] = Field(default_factory=list)
    categories: list[Category] = Field(
        default_factory=list, description="Ordered; this is the panel order"
    )
    collections: dict[str, Collection] = Field(
        default_factory=dict, description="Key: block namespace"
    )
    child_blocks: dict[str, list[str]] = Field(
        default_factory=dict, description="Key: parent block name, value: allowed child names"
    )
    contexts: dict[str, str] = Field(
        default_factory=dict, description="Key: context (client) id, value: block name there"
    )
