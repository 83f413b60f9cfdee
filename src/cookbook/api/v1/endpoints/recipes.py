"""Recipe endpoints.

Provides:
- GET /recipes/random for a random recipe suggestion
- GET /recipes/search for a name search against TheMealDB
- GET /recipes/favorites for the stored favorites
- GET /recipes/stream for live recipe snapshots as server-sent events
- GET /recipes/{recipe_id} for one recipe
- PUT /recipes/{recipe_id}/favorite to toggle the favorite flag
"""

from __future__ import annotations

from contextlib import aclosing
from typing import TYPE_CHECKING, Annotated

import orjson
from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import StreamingResponse

from cookbook.api.dependencies import (
    get_catalog_service,
    get_catalog_store,
    get_favorites_service,
    get_mealdb_client,
)
from cookbook.catalog.protocol import CatalogStore  # noqa: TC001
from cookbook.clients.mealdb.client import MealDBClient  # noqa: TC001
from cookbook.core.exceptions import BadRequestException, NotFoundException
from cookbook.observability.logging import get_logger
from cookbook.schemas.recipe import Recipe
from cookbook.services.catalog import CatalogService, RecipeNotFoundError
from cookbook.services.favorites import FavoritesService  # noqa: TC001


if TYPE_CHECKING:
    from collections.abc import AsyncIterator


logger = get_logger(__name__)

router = APIRouter(prefix="/recipes", tags=["Recipes"])

_SOURCE_ERROR_RESPONSE = {
    502: {
        "description": "Recipe source failed",
        "content": {
            "application/json": {
                "example": {
                    "error": "RECIPE_SOURCE_ERROR",
                    "message": "Failed to fetch recipes. Please try again.",
                }
            }
        },
    },
}


@router.get(
    "/random",
    response_model=Recipe,
    summary="Get a random recipe",
    responses=_SOURCE_ERROR_RESPONSE,
)
async def get_random_recipe(
    client: Annotated[MealDBClient, Depends(get_mealdb_client)],
) -> Recipe:
    """Suggest one random recipe from TheMealDB."""
    return await client.fetch_random()


@router.get(
    "/search",
    response_model=list[Recipe],
    summary="Search recipes by name",
    responses=_SOURCE_ERROR_RESPONSE,
)
async def search_recipes(
    client: Annotated[MealDBClient, Depends(get_mealdb_client)],
    q: Annotated[
        str,
        Query(min_length=1, max_length=100, description="Recipe name to search for"),
    ],
) -> list[Recipe]:
    """Search TheMealDB by recipe name. No match returns an empty list."""
    query = q.strip()
    if not query:
        raise BadRequestException("Search query must not be blank")

    recipes = await client.search(query)
    logger.debug("Search completed", query=query, count=len(recipes))
    return recipes


@router.get(
    "/favorites",
    response_model=list[Recipe],
    summary="List favorite recipes",
)
async def list_favorite_recipes(
    favorites: Annotated[FavoritesService, Depends(get_favorites_service)],
) -> list[Recipe]:
    """Return every stored recipe marked as favorite."""
    return await favorites.list_favorites()


@router.get(
    "/stream",
    response_class=StreamingResponse,
    summary="Stream recipe snapshots",
)
async def stream_recipes(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> StreamingResponse:
    """Push the full recipe list now and again after every catalog change.

    Each snapshot is one server-sent event whose data is the JSON list.
    """

    async def events() -> AsyncIterator[bytes]:
        async with aclosing(store.watch_recipes()) as snapshots:
            async for recipes in snapshots:
                payload = orjson.dumps([recipe.to_document() for recipe in recipes])
                yield b"data: " + payload + b"\n\n"

    return StreamingResponse(
        events(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )


@router.get(
    "/{recipe_id}",
    response_model=Recipe,
    summary="Get a recipe",
    responses={404: {"description": "Recipe not found"}, **_SOURCE_ERROR_RESPONSE},
)
async def get_recipe(
    recipe_id: str,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
) -> Recipe:
    """Return a stored recipe, or fetch it from TheMealDB if never stored."""
    try:
        return await catalog.get_recipe(recipe_id)
    except RecipeNotFoundError as e:
        raise NotFoundException("Recipe", recipe_id) from e


@router.put(
    "/{recipe_id}/favorite",
    response_model=Recipe,
    summary="Toggle a recipe's favorite flag",
    responses={400: {"description": "Path and body ids differ"}},
)
async def toggle_favorite(
    recipe_id: str,
    recipe: Annotated[Recipe, Body(description="The recipe being (un)favorited")],
    favorites: Annotated[FavoritesService, Depends(get_favorites_service)],
) -> Recipe:
    """Flip the favorite flag and save the recipe to the catalog.

    The full record is sent so that recipes seen only in search results or
    random picks can be saved the first time they are favorited.
    """
    if recipe.id != recipe_id:
        msg = f"Path id '{recipe_id}' does not match body id '{recipe.id}'"
        raise BadRequestException(msg)
    return await favorites.toggle_favorite(recipe)
