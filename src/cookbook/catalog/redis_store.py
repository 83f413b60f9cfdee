"""Redis-backed catalog store.

Layout:
- ``<prefix>:categories`` / ``<prefix>:recipes``: hashes of id -> JSON document
- ``<prefix>:changes``: pub/sub channel carrying the name of the changed
  collection after every write

Watchers subscribe to the change channel and re-read the whole hash on each
notification, so they always see full snapshots.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson
import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from cookbook.catalog.base import DocumentCatalogStore, RawDocument
from cookbook.catalog.exceptions import (
    CatalogNotInitializedError,
    CatalogUnavailableError,
)
from cookbook.catalog.protocol import Collection
from cookbook.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from redis.asyncio import Redis

logger = get_logger(__name__)


class RedisCatalogStore(DocumentCatalogStore):
    """Catalog store persisting documents in Redis hashes."""

    backend_name = "redis"

    def __init__(
        self,
        url: str | None = None,
        *,
        key_prefix: str = "cookbook",
        max_connections: int = 20,
        client: Redis[Any] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            url: Redis connection URL, used when no client is injected.
            key_prefix: Prefix for hash keys and the change channel.
            max_connections: Connection pool size.
            client: Redis client to use instead of creating a pool.
        """
        self._url = url
        self._key_prefix = key_prefix
        self._max_connections = max_connections
        self._pool: ConnectionPool[Any] | None = None
        self._client = client
        self._owns_client = client is None

    @property
    def change_channel(self) -> str:
        """Pub/sub channel announcing collection changes."""
        return f"{self._key_prefix}:changes"

    def collection_key(self, collection: Collection) -> str:
        """Hash key holding a collection's documents."""
        return f"{self._key_prefix}:{collection.value}"

    async def initialize(self) -> None:
        """Create the connection pool and verify connectivity."""
        if self._client is None:
            if not self._url:
                msg = "Redis URL not configured"
                raise CatalogUnavailableError(msg)
            self._pool = ConnectionPool.from_url(
                self._url,
                max_connections=self._max_connections,
                decode_responses=True,
            )
            self._client = redis.Redis(connection_pool=self._pool)

        try:
            await self._client.ping()
        except redis.RedisError as e:
            logger.exception("Failed to connect to Redis catalog")
            msg = f"Redis catalog unreachable: {e}"
            raise CatalogUnavailableError(msg) from e
        logger.info("RedisCatalogStore initialized", key_prefix=self._key_prefix)

    async def shutdown(self) -> None:
        """Close the client and pool if we own them."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._pool is not None:
            await self._pool.disconnect()
            self._pool = None
        logger.info("RedisCatalogStore shutdown")

    async def ping(self) -> bool:
        """Return True if Redis answers a PING."""
        if self._client is None:
            return False
        try:
            return bool(await self._client.ping())
        except redis.RedisError:
            return False

    @property
    def _redis(self) -> Redis[Any]:
        if self._client is None:
            msg = "Catalog store not initialized. Call initialize() first."
            raise CatalogNotInitializedError(msg)
        return self._client

    async def _load(self, collection: Collection) -> dict[str, RawDocument]:
        try:
            raw = await self._redis.hgetall(self.collection_key(collection))
        except redis.RedisError as e:
            raise CatalogUnavailableError(str(e)) from e

        documents: dict[str, RawDocument] = {}
        for doc_id, payload in raw.items():
            document = self._decode(payload)
            if document is None:
                logger.debug("Skipping malformed document", doc_id=doc_id)
                continue
            documents[doc_id] = document
        return documents

    async def _load_one(
        self, collection: Collection, doc_id: str
    ) -> RawDocument | None:
        try:
            payload = await self._redis.hget(self.collection_key(collection), doc_id)
        except redis.RedisError as e:
            raise CatalogUnavailableError(str(e)) from e
        return self._decode(payload) if payload is not None else None

    async def _store(
        self,
        collection: Collection,
        doc_id: str,
        document: RawDocument,
        *,
        merge: bool,
    ) -> None:
        stored = document
        if merge:
            existing = await self._load_one(collection, doc_id)
            if existing is not None:
                stored = {**existing, **document}

        try:
            await self._redis.hset(
                self.collection_key(collection),
                doc_id,
                orjson.dumps(stored).decode(),
            )
            await self._redis.publish(self.change_channel, collection.value)
        except redis.RedisError as e:
            raise CatalogUnavailableError(str(e)) from e

    async def _changes(self, collection: Collection) -> AsyncGenerator[None]:
        pubsub = self._redis.pubsub()
        await pubsub.subscribe(self.change_channel)
        try:
            yield None
            async for message in pubsub.listen():
                if message.get("type") != "message":
                    continue
                data = message.get("data")
                if isinstance(data, bytes):
                    data = data.decode()
                if data == collection.value:
                    yield None
        finally:
            await pubsub.unsubscribe(self.change_channel)
            await pubsub.aclose()

    @staticmethod
    def _decode(payload: str | bytes) -> RawDocument | None:
        try:
            document = orjson.loads(payload)
        except orjson.JSONDecodeError:
            return None
        return document if isinstance(document, dict) else None
