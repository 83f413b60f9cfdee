"""Unit test configuration.

Unit tests should be fast and isolated - no external dependencies.
TheMealDB is replaced by httpx.MockTransport and the catalog by the
in-memory store or mocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from cookbook.catalog.memory import InMemoryCatalogStore
from cookbook.clients.mealdb.client import MealDBClient


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Mark all tests in this directory as unit tests
pytestmark = pytest.mark.unit


@pytest.fixture
async def memory_store() -> AsyncGenerator[InMemoryCatalogStore]:
    """Initialized in-memory catalog store."""
    store = InMemoryCatalogStore()
    await store.initialize()
    yield store
    await store.shutdown()


@pytest.fixture
def mock_source() -> MagicMock:
    """Mock recipe source with async operations."""
    source = MagicMock(spec=MealDBClient)
    source.fetch_random = AsyncMock()
    source.search = AsyncMock(return_value=[])
    source.lookup = AsyncMock()
    source.fetch_by_category = AsyncMock(return_value=[])
    return source
