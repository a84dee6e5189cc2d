"""Detect whether an insertion context only accepts its own child blocks."""

import logging

from inserter.models.model_capabilities import ChildNameLookup

logger = logging.getLogger(__name__)


class ChildBlockFilter:
    """Decide whether the inserter is restricted to child blocks.

    A context is restricted when its root block declares at least one child
    block type. Unknown contexts resolve to no child names.
    """

    def __init__(self, lookup: ChildNameLookup) -> None:
        """Initialize with the child-name lookup capability.

        Args:
            lookup: Maps a context id to the names of its allowed children.
        """
        self.lookup = lookup

    def is_restricted(self, context_id: str | None) -> bool:
        """Check whether the context restricts display to child blocks.

        Args:
            context_id: Insertion context (root client id), None for the document root.

        Returns:
            True if the context has at least one designated child block.
        """
        names = self.lookup(context_id) or ()
        restricted = len(names) > 0
        if restricted:
            logger.debug(f"Context {context_id!r} restricted to {len(names)} child blocks")
        return restricted
