"""Process-local catalog store.

Used for development and tests. Documents live in dictionaries and every
watcher has its own queue of change ticks.
"""

from __future__ import annotations

import asyncio
import copy
from typing import TYPE_CHECKING

from cookbook.catalog.base import DocumentCatalogStore, RawDocument
from cookbook.catalog.protocol import Collection
from cookbook.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger(__name__)

# Queued to a watcher to end its iteration
_CLOSED = object()


class InMemoryCatalogStore(DocumentCatalogStore):
    """Catalog store holding documents in memory."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._documents: dict[Collection, dict[str, RawDocument]] = {
            collection: {} for collection in Collection
        }
        self._watchers: dict[Collection, set[asyncio.Queue[object]]] = {
            collection: set() for collection in Collection
        }

    async def shutdown(self) -> None:
        """End all watchers."""
        for queues in self._watchers.values():
            for queue in queues:
                queue.put_nowait(_CLOSED)
        logger.debug("InMemoryCatalogStore shutdown")

    async def _load(self, collection: Collection) -> dict[str, RawDocument]:
        return copy.deepcopy(self._documents[collection])

    async def _load_one(
        self, collection: Collection, doc_id: str
    ) -> RawDocument | None:
        document = self._documents[collection].get(doc_id)
        return copy.deepcopy(document) if document is not None else None

    async def _store(
        self,
        collection: Collection,
        doc_id: str,
        document: RawDocument,
        *,
        merge: bool,
    ) -> None:
        existing = self._documents[collection].get(doc_id)
        if merge and existing is not None:
            stored = {**existing, **copy.deepcopy(document)}
        else:
            stored = copy.deepcopy(document)
        self._documents[collection][doc_id] = stored

        for queue in self._watchers[collection]:
            queue.put_nowait(None)

    async def _changes(self, collection: Collection) -> AsyncGenerator[None]:
        queue: asyncio.Queue[object] = asyncio.Queue()
        self._watchers[collection].add(queue)
        try:
            yield None
            while True:
                tick = await queue.get()
                if tick is _CLOSED:
                    return
                # Collapse a burst of writes into one snapshot
                while not queue.empty():
                    if queue.get_nowait() is _CLOSED:
                        return
                yield None
        finally:
            self._watchers[collection].discard(queue)
