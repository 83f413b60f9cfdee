"""Integration test fixtures.

Builds the full application with TheMealDB served by httpx.MockTransport
and the in-memory catalog store, wired onto app state the way startup
does it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from cookbook.catalog.memory import InMemoryCatalogStore
from cookbook.clients.mealdb.client import MealDBClient
from cookbook.core.config import Settings
from cookbook.core.config.settings import (
    ApiSettings,
    AppSettings,
    CatalogSettings,
    LoggingSettings,
    MealDBSettings,
)
from cookbook.factory import create_app
from cookbook.services.catalog import CatalogService
from cookbook.services.favorites import FavoritesService
from cookbook.services.seeding import CatalogSeeder
from tests.fixtures.mealdb_responses import FakeMealDB


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


pytestmark = pytest.mark.integration

API_PREFIX = "/api/v1/cookbook"


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        APP_ENV="test",
        app=AppSettings(name="test-app", version="0.0.1-test", debug=True),
        api=ApiSettings(v1_prefix=API_PREFIX),
        logging=LoggingSettings(level="DEBUG", format="text"),
        mealdb=MealDBSettings(base_url="https://mealdb.test/api/json/v1/1"),
        catalog=CatalogSettings(seed_on_startup=False),
    )


@pytest.fixture
def fake_api() -> FakeMealDB:
    """Fake TheMealDB with no data."""
    return FakeMealDB()


@pytest.fixture
async def app(
    test_settings: Settings, fake_api: FakeMealDB
) -> AsyncGenerator[FastAPI]:
    """Create FastAPI app with services wired to fakes."""
    app = create_app(test_settings)

    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_api))
    mealdb_client = MealDBClient(test_settings.mealdb, http_client=http)
    await mealdb_client.initialize()
    store = InMemoryCatalogStore()
    await store.initialize()

    app.state.mealdb_client = mealdb_client
    app.state.catalog_store = store
    app.state.catalog_service = CatalogService(store, mealdb_client)
    app.state.favorites_service = FavoritesService(store)
    app.state.seeder = CatalogSeeder(
        store,
        mealdb_client,
        seed_category_names=test_settings.catalog.seed_categories,
    )

    yield app

    await store.shutdown()
    await mealdb_client.shutdown()
    await http.aclose()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
