"""Catalog seeding service."""

from cookbook.services.seeding.models import SeedReport
from cookbook.services.seeding.service import CatalogSeeder


__all__ = ["CatalogSeeder", "SeedReport"]
