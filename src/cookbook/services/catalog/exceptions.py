"""Catalog service exceptions."""

from __future__ import annotations


class CatalogServiceError(Exception):
    """Base exception for catalog service errors."""


class RecipeNotFoundError(CatalogServiceError):
    """Raised when a recipe is neither stored nor known to the recipe source."""

    def __init__(self, recipe_id: str) -> None:
        self.recipe_id = recipe_id
        super().__init__(f"Recipe '{recipe_id}' not found")
