"""Capabilities the inserter consumes from its host.

The grouping engine never reaches into a global store; whoever renders the
inserter passes these in.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from inserter.models.model_item import Category, Collection, Item


class SelectHandler(Protocol):
    """Called with the item the user picked."""

    def __call__(self, item: Item) -> None: ...


class HoverSink(Protocol):
    """Receives the hovered item, or None to hide the preview."""

    def __call__(self, item: Item | None) -> None: ...


@dataclass
class ItemSourceResult:
    """Everything the item source knows about one insertion context."""

    items: list[Item] = field(default_factory=list)
    categories: Sequence[Category] = field(default_factory=tuple)
    collections: Mapping[str, Collection] = field(default_factory=dict)
    on_select: SelectHandler | None = None


class ItemSource(Protocol):
    """Yields the insertable items and taxonomy for a context id."""

    def __call__(self, context_id: str | None) -> ItemSourceResult: ...


class ChildNameLookup(Protocol):
    """Names of the child blocks allowed inside a context (may be empty)."""

    def __call__(self, context_id: str | None) -> Sequence[str] | None: ...
