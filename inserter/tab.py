"""Inserter tab session: binds host capabilities to one insertion context."""

import logging

from inserter.assembler import PresentationAssembler
from inserter.grouping.child_filter import ChildBlockFilter
from inserter.models.model_capabilities import ChildNameLookup, HoverSink, ItemSource
from inserter.models.model_display import DisplayGroup

logger = logging.getLogger(__name__)


class InserterTab:
    """The block types tab of the inserter for a given context.

    Every call to ``groups()`` asks the item source again and recomputes the
    panels, so the result always reflects the current inputs. Closing the tab
    hides the hover preview exactly once, however the tab is left.

    Usage:
        with InserterTab(source, lookup, on_hover, context_id="block-1") as tab:
            panels = tab.groups()
    """

    def __init__(
        self,
        item_source: ItemSource,
        child_name_lookup: ChildNameLookup,
        on_hover: HoverSink,
        context_id: str | None = None,
        show_suggestions: bool = True,
        assembler: PresentationAssembler | None = None,
    ) -> None:
        """Initialize tab.

        Args:
            item_source: Yields items, categories, collections and select handler.
            child_name_lookup: Maps a context id to its allowed child block names.
            on_hover: Hover/preview sink, reset with None on close.
            context_id: Insertion context (root client id).
            show_suggestions: Whether the "Most used" panel may be shown.
            assembler: Presentation assembler to use.
        """
        self.item_source = item_source
        self.child_filter = ChildBlockFilter(child_name_lookup)
        self.on_hover = on_hover
        self.context_id = context_id
        self.show_suggestions = show_suggestions
        self.assembler = assembler or PresentationAssembler()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def groups(self) -> list[DisplayGroup]:
        """Recompute the display groups from the current inputs."""
        source = self.item_source(self.context_id)
        restricted = self.child_filter.is_restricted(self.context_id)
        return self.assembler.assemble(
            source.items,
            source.categories,
            source.collections,
            restricted=restricted,
            show_suggestions=self.show_suggestions,
            on_select=source.on_select,
            on_hover=self.on_hover,
        )

    def close(self) -> None:
        """Hide the block preview. Only the first call has an effect."""
        if self._closed:
            return
        self._closed = True
        logger.debug(f"Closing inserter tab for context {self.context_id!r}")
        self.on_hover(None)

    def __enter__(self) -> "InserterTab":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
