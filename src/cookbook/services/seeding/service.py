"""Catalog seeding from TheMealDB.

Fills an empty catalog with the default categories and every recipe of each
seed category. Recipes are filed under the category they were requested
for, because the API's own category labels are not reliable.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from cookbook.catalog.exceptions import CatalogError
from cookbook.clients.mealdb.exceptions import RecipeSourceError
from cookbook.observability.logging import get_logger
from cookbook.schemas.category import DEFAULT_CATEGORIES
from cookbook.services.seeding.models import SeedReport


if TYPE_CHECKING:
    from collections.abc import Sequence

    from cookbook.catalog.protocol import CatalogStore
    from cookbook.clients.mealdb.client import MealDBClient
    from cookbook.schemas.category import Category

logger = get_logger(__name__)


class CatalogSeeder:
    """Seeds the catalog store with categories and recipes."""

    def __init__(
        self,
        store: CatalogStore,
        source: MealDBClient,
        *,
        categories: Sequence[Category] = DEFAULT_CATEGORIES,
        seed_category_names: Sequence[str] | None = None,
    ) -> None:
        """Initialize the seeder.

        Args:
            store: Catalog store to write to.
            source: Recipe source to fetch from.
            categories: Category documents to write.
            seed_category_names: Categories whose recipes are fetched.
                Defaults to the names of ``categories``.
        """
        self._store = store
        self._source = source
        self._categories = tuple(categories)
        self._seed_names = (
            tuple(seed_category_names)
            if seed_category_names is not None
            else tuple(c.name for c in self._categories)
        )
        self._lock = asyncio.Lock()

    async def seed_if_needed(self) -> SeedReport:
        """Seed the catalog unless it already holds categories.

        Concurrent calls run one at a time, so only the first one seeds.
        """
        async with self._lock:
            return await self._seed()

    async def _seed(self) -> SeedReport:
        if await self._store.list_categories():
            logger.info("Catalog already contains data, skipping seed")
            return SeedReport(skipped=True)

        logger.info("Catalog is empty, seeding from TheMealDB")
        report = SeedReport()
        report.categories_written = await self._seed_categories()

        for name in self._seed_names:
            try:
                report.recipes_written[name] = await self._seed_category_recipes(name)
            except (RecipeSourceError, CatalogError) as e:
                logger.warning(
                    "Failed to seed recipes for category",
                    category=name,
                    error=str(e),
                )
                report.failures[name] = str(e) or type(e).__name__

        logger.info(
            "Finished seeding catalog",
            recipes=report.total_recipes,
            failed_categories=len(report.failures),
        )
        return report

    async def _seed_categories(self) -> int:
        for category in self._categories:
            await self._store.upsert_category(category)
        logger.info("Seeded categories", count=len(self._categories))
        return len(self._categories)

    async def _seed_category_recipes(self, name: str) -> int:
        recipes = await self._source.fetch_by_category(name)
        logger.info("Fetched recipes for seeding", category=name, count=len(recipes))

        for recipe in recipes:
            await self._store.upsert_recipe(recipe.with_category(name), merge=False)
        return len(recipes)
