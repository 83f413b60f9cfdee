"""Catalog browsing service.

Reads categories and recipes from the catalog store, falling back to the
recipe source for single recipes that were never stored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cookbook.clients.mealdb.exceptions import RecipeSourceDecodingError
from cookbook.observability.logging import get_logger
from cookbook.services.catalog.exceptions import RecipeNotFoundError


if TYPE_CHECKING:
    from cookbook.catalog.protocol import CatalogStore
    from cookbook.clients.mealdb.client import MealDBClient
    from cookbook.schemas.category import Category
    from cookbook.schemas.recipe import Recipe

logger = get_logger(__name__)


class CatalogService:
    """Browses the stored catalog."""

    def __init__(self, store: CatalogStore, source: MealDBClient) -> None:
        self._store = store
        self._source = source

    async def list_categories(self) -> list[Category]:
        """Return all categories ordered by id."""
        return sorted(await self._store.list_categories(), key=lambda c: c.id)

    async def list_recipes(self, category: str | None = None) -> list[Recipe]:
        """Return stored recipes, optionally only those filed under ``category``.

        Category names match case-insensitively.
        """
        recipes = await self._store.list_recipes()
        if category is not None:
            wanted = category.casefold()
            recipes = [r for r in recipes if r.category.casefold() == wanted]
        return sorted(recipes, key=lambda r: r.title.casefold())

    async def get_recipe(self, recipe_id: str) -> Recipe:
        """Return a stored recipe, or look it up in the recipe source.

        Raises:
            RecipeNotFoundError: If neither knows the id.
        """
        stored = await self._store.get_recipe(recipe_id)
        if stored is not None:
            return stored

        logger.debug("Recipe not in catalog, looking up source", recipe_id=recipe_id)
        try:
            return await self._source.lookup(recipe_id)
        except RecipeSourceDecodingError as e:
            raise RecipeNotFoundError(recipe_id) from e
