"""Compose the grouping components into the ordered list of inserter panels.

Panel order when not restricted:
1. Most used (if enabled and non-empty)
2. One panel per non-empty category, in category registry order
3. Uncategorized (if non-empty)
4. One panel per non-empty collection, in collection registry order

When the context only accepts child blocks, a single "Child Blocks" panel
holding the whole (already scoped) catalog replaces all of the above.
"""

import logging
from collections.abc import Mapping, Sequence

from inserter.consts import CHILD_BLOCKS_LABEL, MOST_USED_LABEL, UNCATEGORIZED_LABEL
from inserter.grouping.category_partitioner import CategoryPartitioner
from inserter.grouping.collection_partitioner import CollectionPartitioner
from inserter.grouping.suggestion_ranker import SuggestionRanker
from inserter.grouping.uncategorized import UncategorizedBucketer
from inserter.models.model_capabilities import HoverSink, SelectHandler
from inserter.models.model_display import DisplayGroup, GroupKind
from inserter.models.model_item import Category, Collection, Item

logger = logging.getLogger(__name__)


class PresentationAssembler:
    """Build display groups from a catalog and its taxonomy registries.

    Holds no state between calls: every ``assemble()`` recomputes all groups
    from its arguments.
    """

    def __init__(
        self,
        ranker: SuggestionRanker | None = None,
        category_partitioner: CategoryPartitioner | None = None,
        uncategorized_bucketer: UncategorizedBucketer | None = None,
        collection_partitioner: CollectionPartitioner | None = None,
    ) -> None:
        """Initialize assembler with its grouping components.

        Args:
            ranker: Suggestion ranker (defaults to top 6 by frecency).
            category_partitioner: Category grouping (defaults to excluding 'reusable').
            uncategorized_bucketer: Uncategorized grouping.
            collection_partitioner: Collection grouping.
        """
        self.ranker = ranker or SuggestionRanker()
        self.category_partitioner = category_partitioner or CategoryPartitioner()
        self.uncategorized_bucketer = uncategorized_bucketer or UncategorizedBucketer()
        self.collection_partitioner = collection_partitioner or CollectionPartitioner()

    def assemble(
        self,
        items: list[Item],
        categories: Sequence[Category] = (),
        collections: Mapping[str, Collection] | None = None,
        restricted: bool = False,
        show_suggestions: bool = True,
        on_select: SelectHandler | None = None,
        on_hover: HoverSink | None = None,
    ) -> list[DisplayGroup]:
        """Assemble the ordered panels for one render.

        Args:
            items: Item catalog (already scoped to the context by the item source).
            categories: Ordered category registry.
            collections: Mapping namespace -> Collection.
            restricted: Whether the context only accepts child blocks.
            show_suggestions: Whether the "Most used" panel may be shown.
            on_select: Handler attached to every group.
            on_hover: Hover/preview sink attached to every group.

        Returns:
            Display groups in render order.
        """
        categories = categories or ()
        collections = collections or {}

        def group(kind: GroupKind, title: str, group_items: list[Item], **kwargs) -> DisplayGroup:
            return DisplayGroup(
                kind=kind,
                title=title,
                items=group_items,
                on_select=on_select,
                on_hover=on_hover,
                **kwargs,
            )

        # Upstream already dropped non-child blocks, so pass every item along
        if restricted:
            logger.debug(f"Restricted to child blocks: {len(items)} items")
            return [group(GroupKind.CHILD, CHILD_BLOCKS_LABEL, list(items))]

        groups: list[DisplayGroup] = []

        if show_suggestions:
            suggested = self.ranker.rank(items)
            if suggested:
                groups.append(group(GroupKind.SUGGESTED, MOST_USED_LABEL, suggested))

        for category, category_items in self.category_partitioner.groups(items, categories):
            groups.append(
                group(
                    GroupKind.CATEGORY,
                    category.title,
                    category_items,
                    icon=category.icon,
                    key=category.slug,
                )
            )

        uncategorized = self.uncategorized_bucketer.bucket(items)
        if uncategorized:
            groups.append(group(GroupKind.UNCATEGORIZED, UNCATEGORIZED_LABEL, uncategorized))

        for namespace, collection, collection_items in self.collection_partitioner.groups(
            items, collections
        ):
            groups.append(
                group(
                    GroupKind.COLLECTION,
                    collection.title,
                    collection_items,
                    icon=collection.icon,
                    key=namespace,
                )
            )

        logger.debug(f"Assembled {len(groups)} groups from {len(items)} items")
        return groups
