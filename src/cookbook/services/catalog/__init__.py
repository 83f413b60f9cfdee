"""Catalog browsing service."""

from cookbook.services.catalog.exceptions import (
    CatalogServiceError,
    RecipeNotFoundError,
)
from cookbook.services.catalog.service import CatalogService


__all__ = ["CatalogService", "CatalogServiceError", "RecipeNotFoundError"]
