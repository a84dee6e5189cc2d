"""File-backed block catalog implementing the inserter's host capabilities.

The grouping engine does no I/O. This store is what the CLI (or any other
host) uses to read a catalog from disk and hand the engine its item source
and child-name lookup.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from inserter.models.model_capabilities import ItemSourceResult, SelectHandler
from inserter.models.model_item import Item
from inserter.models.model_storage import CatalogFile

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or validated."""


class CatalogStore:
    """In-memory view of a catalog file."""

    def __init__(self, catalog: CatalogFile | None = None) -> None:
        self.catalog = catalog or CatalogFile()

    @classmethod
    def load(cls, path: Path | str) -> "CatalogStore":
        """Load and validate a catalog file.

        Args:
            path: JSON catalog path.

        Returns:
            Store wrapping the validated catalog.

        Raises:
            CatalogError: If the file is missing, not JSON, or invalid.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e

        try:
            catalog = CatalogFile.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"Catalog {path} is invalid: {e}") from e

        logger.info(
            f"Loaded catalog {path}: {len(catalog.items)} items, "
            f"{len(catalog.categories)} categories, {len(catalog.collections)} collections"
        )
        return cls(catalog)

    def save(self, path: Path | str) -> Path:
        """Write the catalog as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.catalog.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Saved catalog: {path} ({len(self.catalog.items)} items)")
        return path

    def get_block_name(self, context_id: str | None) -> str | None:
        """Name of the block placed at a context, None for the root or unknown ids."""
        if context_id is None:
            return None
        return self.catalog.contexts.get(context_id)

    def get_child_block_names(self, block_name: str | None) -> list[str]:
        """Child block names declared for a parent block type."""
        if block_name is None:
            return []
        return list(self.catalog.child_blocks.get(block_name, []))

    def child_names(self, context_id: str | None) -> list[str]:
        """Child-name lookup: context id -> allowed child block names."""
        return self.get_child_block_names(self.get_block_name(context_id))

    def items_for(self, context_id: str | None) -> list[Item]:
        """Items insertable at a context.

        Contexts with declared children only accept those children.
        """
        allowed = self.child_names(context_id)
        if not allowed:
            return list(self.catalog.items)
        return [item for item in self.catalog.items if item.name in allowed]

    def item_source(
        self, on_select: SelectHandler | None = None
    ) -> Callable[[str | None], ItemSourceResult]:
        """Build an item source bound to this catalog.

        Args:
            on_select: Selection handler handed out with every result.
        """

        def source(context_id: str | None) -> ItemSourceResult:
            return ItemSourceResult(
                items=self.items_for(context_id),
                categories=tuple(self.catalog.categories),
                collections=dict(self.catalog.collections),
                on_select=on_select,
            )

        return source
