"""Display groups produced by the presentation assembler."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from inserter.models.model_capabilities import HoverSink, SelectHandler
from inserter.models.model_item import Item


class GroupKind(str, Enum):
    """Kinds of inserter panels, in the order they can appear."""

    CHILD = "child"
    SUGGESTED = "suggested"
    CATEGORY = "category"
    UNCATEGORIZED = "uncategorized"
    COLLECTION = "collection"


@dataclass
class DisplayGroup:
    """One titled panel of items, ready to render."""

    kind: GroupKind
    title: str
    items: list[Item] = field(default_factory=list)
    label: str = ""
    icon: str | None = None
    key: str = ""  # category slug, collection namespace, or the kind itself
    on_select: SelectHandler | None = None
    on_hover: HoverSink | None = None

    def __post_init__(self) -> None:
        if not self.label:
            self.label = self.title
        if not self.key:
            self.key = self.kind.value

    def item_names(self) -> list[str]:
        return [item.name for item in self.items]

    def to_dict(self) -> dict[str, Any]:
        """Plain representation, without the handlers."""
        return {
            "kind": self.kind.value,
            "key": self.key,
            "title": self.title,
            "label": self.label,
            "icon": self.icon,
            "items": [item.model_dump(mode="json") for item in self.items],
        }
