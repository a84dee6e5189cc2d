"""Collect items that have no category."""

from inserter.models.model_item import Item


class UncategorizedBucketer:
    """Isolate items without a category, in catalog order."""

    def bucket(self, items: list[Item]) -> list[Item]:
        return [item for item in items if item.is_uncategorized]
