"""Unit tests for CatalogService."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from cookbook.catalog.memory import InMemoryCatalogStore
from cookbook.clients.mealdb.exceptions import (
    RecipeSourceDecodingError,
    RecipeSourceUnavailableError,
)
from cookbook.schemas.category import DEFAULT_CATEGORIES
from cookbook.services.catalog import CatalogService, RecipeNotFoundError
from tests.factories.recipe import RecipeFactory


pytestmark = pytest.mark.unit


@pytest.fixture
def service(
    memory_store: InMemoryCatalogStore, mock_source: MagicMock
) -> CatalogService:
    """Catalog service over the in-memory store and a mock source."""
    return CatalogService(memory_store, mock_source)


class TestListCategories:
    """Tests for list_categories."""

    async def test_sorted_by_id(
        self, service: CatalogService, memory_store: InMemoryCatalogStore
    ) -> None:
        """Should order categories by id regardless of write order."""
        for category in reversed(DEFAULT_CATEGORIES):
            await memory_store.upsert_category(category)

        categories = await service.list_categories()

        assert [c.id for c in categories] == ["C1", "C2", "C3", "C4", "C5"]


class TestListRecipes:
    """Tests for list_recipes."""

    async def test_sorted_by_title(
        self, service: CatalogService, memory_store: InMemoryCatalogStore
    ) -> None:
        """Should order recipes by title, ignoring case."""
        await memory_store.upsert_recipe(RecipeFactory.build(id="1", title="tart"))
        await memory_store.upsert_recipe(RecipeFactory.build(id="2", title="Apple pie"))
        await memory_store.upsert_recipe(RecipeFactory.build(id="3", title="Kedgeree"))

        recipes = await service.list_recipes()

        assert [r.title for r in recipes] == ["Apple pie", "Kedgeree", "tart"]

    async def test_filters_by_category(
        self, service: CatalogService, memory_store: InMemoryCatalogStore
    ) -> None:
        """Should return only recipes filed under the category, any case."""
        await memory_store.upsert_recipe(RecipeFactory.build(id="1", category="Seafood"))
        await memory_store.upsert_recipe(RecipeFactory.build(id="2", category="Pasta"))

        recipes = await service.list_recipes(category="seafood")

        assert [r.id for r in recipes] == ["1"]


class TestGetRecipe:
    """Tests for get_recipe."""

    async def test_prefers_stored_recipe(
        self,
        service: CatalogService,
        memory_store: InMemoryCatalogStore,
        mock_source: MagicMock,
    ) -> None:
        """Should not call the source for a stored recipe."""
        recipe = RecipeFactory.build(id="1", is_favorite=True)
        await memory_store.upsert_recipe(recipe)

        assert await service.get_recipe("1") == recipe
        mock_source.lookup.assert_not_called()

    async def test_falls_back_to_source(
        self, service: CatalogService, mock_source: MagicMock
    ) -> None:
        """Should look up recipes that were never stored."""
        recipe = RecipeFactory.build(id="9")
        mock_source.lookup.return_value = recipe

        assert await service.get_recipe("9") == recipe
        mock_source.lookup.assert_awaited_once_with("9")

    async def test_unknown_id_raises_not_found(
        self, service: CatalogService, mock_source: MagicMock
    ) -> None:
        """Should raise RecipeNotFoundError when the source has no such meal."""
        mock_source.lookup.side_effect = RecipeSourceDecodingError("no meal")

        with pytest.raises(RecipeNotFoundError) as exc_info:
            await service.get_recipe("404")

        assert exc_info.value.recipe_id == "404"

    async def test_source_outage_propagates(
        self, service: CatalogService, mock_source: MagicMock
    ) -> None:
        """Should let transport failures through unchanged."""
        mock_source.lookup.side_effect = RecipeSourceUnavailableError("down")

        with pytest.raises(RecipeSourceUnavailableError):
            await service.get_recipe("1")
