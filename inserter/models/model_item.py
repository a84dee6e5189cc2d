"""Catalog and taxonomy models for the inserter."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inserter.consts import NAMESPACE_SEPARATOR


class Item(BaseModel):
    """An insertable block type as returned by the item source.

    Only ``name``, ``category`` and ``frecency`` are interpreted by the
    grouping engine. Any other field (title, icon, description, ...) is kept
    as-is and handed back to the renderer untouched.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(default="", description="Namespaced name, e.g. 'core/paragraph'")
    category: str | None = Field(default=None, description="Category slug, None if uncategorized")
    frecency: float = Field(default=0.0, description="Blended frequency/recency usage score")

    @field_validator("frecency", mode="before")
    @classmethod
    def _missing_frecency_is_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    @field_validator("frecency")
    @classmethod
    def _non_finite_frecency_is_zero(cls, value: float) -> float:
        # NaN has no order, which would break the "Most used" ranking
        return value if math.isfinite(value) else 0.0

    @property
    def namespace(self) -> str:
        """Part of the name before the first '/' (whole name if there is none)."""
        return self.name.split(NAMESPACE_SEPARATOR, 1)[0]

    @property
    def is_uncategorized(self) -> bool:
        return not self.category


class Category(BaseModel):
    """A registered block category. Registry order is display order."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    icon: str | None = None


class Collection(BaseModel):
    """A registered block collection, keyed by namespace in the registry."""

    model_config = ConfigDict(frozen=True)

    title: str
    icon: str | None = None
