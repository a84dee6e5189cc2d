"""Rank items for the "Most used" panel."""

from inserter.consts import MAX_SUGGESTED_ITEMS
from inserter.models.model_item import Item


class SuggestionRanker:
    """Pick the most used items by frecency."""

    def __init__(self, max_items: int = MAX_SUGGESTED_ITEMS) -> None:
        self.max_items = max_items

    def rank(self, items: list[Item]) -> list[Item]:
        """Sort by frecency (highest first) and keep the top entries.

        The sort is stable, so items with equal frecency keep catalog order.

        Args:
            items: Full, unfiltered catalog.

        Returns:
            At most ``max_items`` items.
        """
        ranked = sorted(items, key=lambda item: item.frecency, reverse=True)
        return ranked[: self.max_items]
