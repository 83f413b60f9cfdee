"""Shared typed operations for document-backed catalog stores.

Backends only move raw JSON documents around; this base class turns them
into Category and Recipe records. Documents that no longer decode (written
by an older schema or another client) are skipped, not fatal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import aclosing
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from cookbook.catalog.protocol import Collection
from cookbook.observability.logging import get_logger
from cookbook.schemas.category import Category
from cookbook.schemas.recipe import Recipe


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, AsyncIterator

    from cookbook.schemas.base import Document

logger = get_logger(__name__)

D = TypeVar("D", bound="Document")

RawDocument = dict[str, Any]


def decode_documents(
    model: type[D],
    documents: dict[str, RawDocument],
) -> list[D]:
    """Decode raw documents, skipping any that fail validation."""
    records: list[D] = []
    for doc_id, document in documents.items():
        try:
            records.append(model.model_validate(document))
        except ValidationError:
            logger.debug(
                "Skipping undecodable document",
                model=model.__name__,
                doc_id=doc_id,
            )
    return records


class DocumentCatalogStore(ABC):
    """Catalog store built on raw document primitives."""

    backend_name = "abstract"

    # =========================================================================
    # Backend primitives
    # =========================================================================

    @abstractmethod
    async def _load(self, collection: Collection) -> dict[str, RawDocument]:
        """Return every document in a collection keyed by id."""

    @abstractmethod
    async def _load_one(
        self, collection: Collection, doc_id: str
    ) -> RawDocument | None:
        """Return one document, or None if absent."""

    @abstractmethod
    async def _store(
        self,
        collection: Collection,
        doc_id: str,
        document: RawDocument,
        *,
        merge: bool,
    ) -> None:
        """Write a document and notify watchers of the collection."""

    @abstractmethod
    def _changes(self, collection: Collection) -> AsyncGenerator[None]:
        """Tick once immediately, then once after every change."""

    async def initialize(self) -> None:
        """Open connections."""

    async def shutdown(self) -> None:
        """Close connections."""

    async def ping(self) -> bool:
        """Return True if the backing store is reachable."""
        return True

    # =========================================================================
    # Typed operations
    # =========================================================================

    async def list_categories(self) -> list[Category]:
        """Return the current categories snapshot."""
        return decode_documents(Category, await self._load(Collection.CATEGORIES))

    async def list_recipes(self) -> list[Recipe]:
        """Return the current recipes snapshot."""
        return decode_documents(Recipe, await self._load(Collection.RECIPES))

    async def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return one stored recipe, or None if absent or undecodable."""
        document = await self._load_one(Collection.RECIPES, recipe_id)
        if document is None:
            return None
        decoded = decode_documents(Recipe, {recipe_id: document})
        return decoded[0] if decoded else None

    async def upsert_category(self, category: Category) -> None:
        """Create or overwrite a category document."""
        await self._store(
            Collection.CATEGORIES,
            category.id,
            category.to_document(),
            merge=False,
        )

    async def upsert_recipe(self, recipe: Recipe, *, merge: bool = True) -> None:
        """Create a recipe document, or merge into / overwrite an existing one.

        With ``merge`` the record's fields replace the stored ones while
        fields unknown to the record are kept.
        """
        await self._store(
            Collection.RECIPES,
            recipe.id,
            recipe.to_document(),
            merge=merge,
        )
        logger.debug("Recipe saved", recipe_id=recipe.id, merge=merge)

    async def watch_categories(self) -> AsyncIterator[list[Category]]:
        """Yield the categories snapshot now and after every change."""
        async with aclosing(self._changes(Collection.CATEGORIES)) as changes:
            async for _ in changes:
                yield await self.list_categories()

    async def watch_recipes(self) -> AsyncIterator[list[Recipe]]:
        """Yield the recipes snapshot now and after every change.

        Closing the iterator releases the subscription.
        """
        async with aclosing(self._changes(Collection.RECIPES)) as changes:
            async for _ in changes:
                yield await self.list_recipes()
