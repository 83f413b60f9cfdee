"""Recipe catalog: persisted categories and recipes with live snapshots."""

from cookbook.catalog.exceptions import (
    CatalogError,
    CatalogNotInitializedError,
    CatalogUnavailableError,
)
from cookbook.catalog.factory import create_catalog_store
from cookbook.catalog.memory import InMemoryCatalogStore
from cookbook.catalog.protocol import CatalogStore, Collection
from cookbook.catalog.redis_store import RedisCatalogStore


__all__ = [
    "CatalogError",
    "CatalogNotInitializedError",
    "CatalogStore",
    "CatalogUnavailableError",
    "Collection",
    "InMemoryCatalogStore",
    "RedisCatalogStore",
    "create_catalog_store",
]
