"""Favorites service.

Favoriting writes the whole record with upsert-merge, so a recipe that only
came from a search or random pick becomes part of the catalog the first
time it is favorited.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cookbook.observability.logging import get_logger


if TYPE_CHECKING:
    from cookbook.catalog.protocol import CatalogStore
    from cookbook.schemas.recipe import Recipe

logger = get_logger(__name__)


class FavoritesService:
    """Marks and lists favorite recipes."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    async def toggle_favorite(self, recipe: Recipe) -> Recipe:
        """Flip a recipe's favorite flag and save it.

        The stored flag wins over the caller's copy, which may be stale
        (records fresh from the API always say "not favorite").

        Returns:
            The record as saved.
        """
        stored = await self._store.get_recipe(recipe.id)
        is_favorite = stored.is_favorite if stored is not None else recipe.is_favorite

        updated = recipe.with_favorite(is_favorite=not is_favorite)
        await self._store.upsert_recipe(updated, merge=True)
        logger.info(
            "Toggled favorite",
            recipe_id=recipe.id,
            is_favorite=updated.is_favorite,
        )
        return updated

    async def list_favorites(self) -> list[Recipe]:
        """Return all stored recipes marked as favorite."""
        return [r for r in await self._store.list_recipes() if r.is_favorite]
