"""Category endpoints.

Provides:
- GET /categories for the category list
- GET /categories/{name}/recipes for the stored recipes of one category
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from cookbook.api.dependencies import get_catalog_service
from cookbook.schemas.category import Category
from cookbook.schemas.recipe import Recipe
from cookbook.services.catalog import CatalogService  # noqa: TC001


router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[Category],
    summary="List categories",
)
async def list_categories(
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
) -> list[Category]:
    """Return all categories in the catalog."""
    return await catalog.list_categories()


@router.get(
    "/{name}/recipes",
    response_model=list[Recipe],
    summary="List recipes in a category",
)
async def list_category_recipes(
    name: str,
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
) -> list[Recipe]:
    """Return stored recipes filed under the category, sorted by title."""
    return await catalog.list_recipes(category=name)
