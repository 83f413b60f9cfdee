"""FastAPI dependencies for service access.

Services are created during application startup and stored in app.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Request

from cookbook.core.config import Settings, get_settings
from cookbook.core.exceptions import ServiceUnavailableException


if TYPE_CHECKING:
    from cookbook.catalog.protocol import CatalogStore
    from cookbook.clients.mealdb.client import MealDBClient
    from cookbook.services.catalog import CatalogService
    from cookbook.services.favorites import FavoritesService
    from cookbook.services.seeding import CatalogSeeder


def _from_state(request: Request, attribute: str, label: str) -> Any:
    service = getattr(request.app.state, attribute, None)
    if service is None:
        raise ServiceUnavailableException(f"{label} not available")
    return service


async def get_mealdb_client(request: Request) -> MealDBClient:
    """Get the TheMealDB client from app state.

    Raises:
        ServiceUnavailableException: 503 if the client is not initialized.
    """
    return _from_state(request, "mealdb_client", "Recipe source")


async def get_catalog_store(request: Request) -> CatalogStore:
    """Get the catalog store from app state."""
    return _from_state(request, "catalog_store", "Recipe catalog")


async def get_catalog_service(request: Request) -> CatalogService:
    """Get the catalog browsing service from app state."""
    return _from_state(request, "catalog_service", "Recipe catalog")


async def get_favorites_service(request: Request) -> FavoritesService:
    """Get the favorites service from app state."""
    return _from_state(request, "favorites_service", "Favorites")


async def get_seeder(request: Request) -> CatalogSeeder:
    """Get the catalog seeder from app state."""
    return _from_state(request, "seeder", "Catalog seeding")


async def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()
