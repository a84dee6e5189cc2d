"""Group catalog items into category panels.

Panels follow the category registry order, which is set by whoever registers
the categories and has nothing to do with item counts or titles.
"""

import logging
from collections.abc import Sequence

from inserter.consts import RESERVED_CATEGORY
from inserter.models.model_item import Category, Item

logger = logging.getLogger(__name__)

NOT_FOUND = -1


def get_category_index(item: Item, categories: Sequence[Category]) -> int:
    """Position of the item's category in the registry, -1 if unregistered."""
    for index, category in enumerate(categories):
        if category.slug == item.category:
            return index
    return NOT_FOUND


class CategoryPartitioner:
    """Split items into per-category buckets in registry order."""

    def __init__(self, reserved_slug: str = RESERVED_CATEGORY) -> None:
        """Initialize partitioner.

        Args:
            reserved_slug: Category whose items never get a category panel.
        """
        self.reserved_slug = reserved_slug

    def partition(
        self,
        items: list[Item],
        categories: Sequence[Category],
    ) -> dict[str, list[Item]]:
        """Bucket categorized items by slug.

        Items whose slug is missing from the registry get index -1 and so
        sort ahead of every registered category. They still get a bucket
        here, but ``groups()`` never emits it since no Category exists for it.

        Args:
            items: Item catalog.
            categories: Ordered category registry.

        Returns:
            Mapping slug -> items, keys in sorted-index order, items in
            catalog order within each bucket.
        """
        eligible = [
            item for item in items if item.category and item.category != self.reserved_slug
        ]
        # sorted() is stable: catalog order is kept within one index
        ordered = sorted(eligible, key=lambda item: get_category_index(item, categories))

        buckets: dict[str, list[Item]] = {}
        orphaned = 0
        for item in ordered:
            if get_category_index(item, categories) == NOT_FOUND:
                orphaned += 1
            buckets.setdefault(item.category, []).append(item)

        if orphaned:
            logger.debug(f"{orphaned} items reference unregistered categories")

        return buckets

    def groups(
        self,
        items: list[Item],
        categories: Sequence[Category],
    ) -> list[tuple[Category, list[Item]]]:
        """Non-empty category buckets paired with their Category, in registry order."""
        buckets = self.partition(items, categories)
        result = []
        for category in categories:
            category_items = buckets.get(category.slug)
            if not category_items:
                continue
            result.append((category, category_items))
        return result
