"""Normalized recipe record.

A Recipe is produced fresh by every acquisition call and is independent of
the source it came from. The category field is a filter label that callers
may correct after the fact, since the source's own labels are unreliable.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from cookbook.schemas.base import Document


class Recipe(Document):
    """A recipe ready for display or persistence."""

    id: str = Field(..., description="Identifier, stable across sources")
    title: str = Field(..., description="Recipe title")
    image_url: str = Field(default="", description="Thumbnail URL, may be empty")
    category: str = Field(default="", description="Category label used for filtering")
    cuisine: str = Field(default="", description="Cuisine or origin, e.g. 'British'")
    ingredients: list[str] = Field(
        default_factory=list,
        description="Display strings such as '1 tsp Salt', in source order",
    )
    instructions: str = Field(default="", description="Free-text instructions")
    is_favorite: bool = Field(default=False, description="Marked as favorite")

    @field_validator("id", "title")
    @classmethod
    def _require_non_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return v

    def with_category(self, category: str) -> Recipe:
        """Return a copy filed under ``category``."""
        return self.model_copy(update={"category": category})

    def with_favorite(self, *, is_favorite: bool) -> Recipe:
        """Return a copy with the favorite flag set."""
        return self.model_copy(update={"is_favorite": is_favorite})
