"""Seeding result model."""

from __future__ import annotations

from pydantic import Field

from cookbook.schemas.base import APIResponse


class SeedReport(APIResponse):
    """Outcome of a catalog seeding run."""

    skipped: bool = Field(
        default=False,
        description="True if the catalog already held data and nothing was written",
    )
    categories_written: int = Field(default=0, ge=0)
    recipes_written: dict[str, int] = Field(
        default_factory=dict,
        description="Recipes saved per category name",
    )
    failures: dict[str, str] = Field(
        default_factory=dict,
        description="Error message per category that could not be seeded",
    )

    @property
    def total_recipes(self) -> int:
        """Recipes saved across all categories."""
        return sum(self.recipes_written.values())
