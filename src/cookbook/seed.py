"""Command-line catalog seeding.

Usage:
    cookbook-seed
    APP_ENV=production cookbook-seed

Seeds the configured catalog store from TheMealDB if it holds no
categories yet, then prints the report as JSON.
"""

from __future__ import annotations

import asyncio
import sys

from cookbook.catalog.factory import create_catalog_store
from cookbook.clients.mealdb.client import MealDBClient
from cookbook.core.config import get_settings
from cookbook.observability.logging import setup_logging
from cookbook.services.seeding import CatalogSeeder, SeedReport


async def seed_catalog() -> SeedReport:
    """Seed the configured catalog store once."""
    settings = get_settings()
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    client = MealDBClient(settings.mealdb)
    store = create_catalog_store(settings)
    await client.initialize()
    try:
        await store.initialize()
        try:
            seeder = CatalogSeeder(
                store,
                client,
                seed_category_names=settings.catalog.seed_categories,
            )
            return await seeder.seed_if_needed()
        finally:
            await store.shutdown()
    finally:
        await client.shutdown()


def main() -> int:
    """Run seeding and print the report. Exit status 1 if any category failed."""
    report = asyncio.run(seed_catalog())
    sys.stdout.write(report.model_dump_json(indent=2) + "\n")
    return 1 if report.failures else 0


if __name__ == "__main__":
    sys.exit(main())
