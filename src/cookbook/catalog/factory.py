"""Catalog store factory.

Creates the catalog store selected by the ``catalog.backend`` setting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cookbook.catalog.memory import InMemoryCatalogStore
from cookbook.catalog.redis_store import RedisCatalogStore
from cookbook.core.config import CatalogBackend, get_settings
from cookbook.observability.logging import get_logger


if TYPE_CHECKING:
    from cookbook.catalog.protocol import CatalogStore
    from cookbook.core.config import Settings

logger = get_logger(__name__)


def create_catalog_store(settings: Settings | None = None) -> CatalogStore:
    """Create an uninitialized catalog store for the configured backend.

    Args:
        settings: Application settings. If None, loaded from environment.

    Returns:
        Catalog store; call ``initialize()`` before use.
    """
    if settings is None:
        settings = get_settings()

    backend = CatalogBackend(settings.catalog.backend)
    logger.info("Creating catalog store", backend=backend.value)

    if backend == CatalogBackend.REDIS:
        return RedisCatalogStore(
            settings.redis_url,
            key_prefix=settings.catalog.key_prefix,
            max_connections=settings.redis.max_connections,
        )
    return InMemoryCatalogStore()
