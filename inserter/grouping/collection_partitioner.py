"""Group catalog items by block namespace into collection panels."""

import logging
from collections.abc import Mapping

from inserter.models.model_item import Collection, Item

logger = logging.getLogger(__name__)


class CollectionPartitioner:
    """Match items to registered collections by namespace prefix."""

    def partition(
        self,
        items: list[Item],
        collections: Mapping[str, Collection],
    ) -> dict[str, list[Item]]:
        """Select the items of each registered collection.

        The registry itself is left untouched; a fresh mapping is built.

        Args:
            items: Item catalog.
            collections: Mapping namespace -> Collection.

        Returns:
            Mapping namespace -> items, in registry iteration order, with
            collections that match no item left out.
        """
        result: dict[str, list[Item]] = {}
        for namespace in collections:
            collection_items = [item for item in items if item.namespace == namespace]
            if not collection_items:
                logger.debug(f"Collection {namespace!r} has no items, skipping")
                continue
            result[namespace] = collection_items
        return result

    def groups(
        self,
        items: list[Item],
        collections: Mapping[str, Collection],
    ) -> list[tuple[str, Collection, list[Item]]]:
        """Non-empty collections as (namespace, collection, items) in registry order."""
        buckets = self.partition(items, collections)
        return [
            (namespace, collections[namespace], collection_items)
            for namespace, collection_items in buckets.items()
        ]
