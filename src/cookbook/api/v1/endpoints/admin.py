"""Administrative endpoints.

Provides:
- POST /admin/seed to fill an empty catalog from TheMealDB
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from cookbook.api.dependencies import get_seeder
from cookbook.observability.logging import get_logger
from cookbook.services.seeding import CatalogSeeder, SeedReport  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/seed",
    response_model=SeedReport,
    summary="Seed the catalog",
    description=(
        "Writes the default categories and fetches every recipe of each seed "
        "category. Does nothing if the catalog already holds categories."
    ),
)
async def seed_catalog(
    seeder: Annotated[CatalogSeeder, Depends(get_seeder)],
) -> SeedReport:
    """Seed the catalog if it is empty."""
    logger.info("Catalog seed requested")
    return await seeder.seed_if_needed()
