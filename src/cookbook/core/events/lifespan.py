"""Application lifespan event handlers.

Startup creates the TheMealDB client and the catalog store, wires the
services onto ``app.state`` and optionally seeds an empty catalog.
Shutdown releases them in reverse order.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from cookbook.catalog.factory import create_catalog_store
from cookbook.clients.mealdb.client import MealDBClient
from cookbook.core.config import Settings, get_settings
from cookbook.observability.logging import get_logger, setup_logging
from cookbook.services.catalog import CatalogService
from cookbook.services.favorites import FavoritesService
from cookbook.services.seeding import CatalogSeeder


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
    )

    mealdb_client = MealDBClient(settings.mealdb)
    await mealdb_client.initialize()
    app.state.mealdb_client = mealdb_client

    # The catalog is critical - don't continue without it
    catalog_store = create_catalog_store(settings)
    try:
        await catalog_store.initialize()
    except Exception:
        logger.exception("Failed to initialize catalog store")
        await mealdb_client.shutdown()
        raise
    app.state.catalog_store = catalog_store

    app.state.catalog_service = CatalogService(catalog_store, mealdb_client)
    app.state.favorites_service = FavoritesService(catalog_store)
    app.state.seeder = CatalogSeeder(
        catalog_store,
        mealdb_client,
        seed_category_names=settings.catalog.seed_categories,
    )

    if settings.catalog.seed_on_startup:
        await _seed_catalog(app.state.seeder)

    logger.info("Application startup complete")


async def _seed_catalog(seeder: CatalogSeeder) -> None:
    """Seed the catalog (non-critical)."""
    try:
        report = await seeder.seed_if_needed()
    except Exception:
        logger.exception("Catalog seeding failed - continuing with current data")
        return
    if not report.skipped:
        logger.info(
            "Catalog seeded on startup",
            recipes=report.total_recipes,
            failures=report.failures,
        )


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")

    catalog_store = getattr(app.state, "catalog_store", None)
    if catalog_store is not None:
        await catalog_store.shutdown()

    mealdb_client = getattr(app.state, "mealdb_client", None)
    if mealdb_client is not None:
        await mealdb_client.shutdown()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
