"""Catalog store protocol definition.

The catalog is a document store with two collections, categories and
recipes, keyed by identifier. Readers get full snapshots, either on demand
or pushed on every change. Writers upsert: create the document if absent,
otherwise merge the record's fields into it. Last write wins.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from cookbook.schemas.category import Category
    from cookbook.schemas.recipe import Recipe


class Collection(StrEnum):
    """Document collections held by the catalog."""

    CATEGORIES = "categories"
    RECIPES = "recipes"


@runtime_checkable
class CatalogStore(Protocol):
    """Protocol for catalog store implementations."""

    @property
    def backend_name(self) -> str:
        """Short backend identifier for logging and readiness checks."""
        ...

    async def initialize(self) -> None:
        """Open connections."""
        ...

    async def shutdown(self) -> None:
        """Close connections and end all watchers."""
        ...

    async def ping(self) -> bool:
        """Return True if the backing store is reachable."""
        ...

    async def list_categories(self) -> list[Category]:
        """Return the current categories snapshot."""
        ...

    async def list_recipes(self) -> list[Recipe]:
        """Return the current recipes snapshot."""
        ...

    async def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return one stored recipe, or None."""
        ...

    async def upsert_category(self, category: Category) -> None:
        """Create or overwrite a category document."""
        ...

    async def upsert_recipe(self, recipe: Recipe, *, merge: bool = True) -> None:
        """Create a recipe document, or merge into / overwrite an existing one."""
        ...

    def watch_categories(self) -> AsyncIterator[list[Category]]:
        """Yield the categories snapshot now and after every change."""
        ...

    def watch_recipes(self) -> AsyncIterator[list[Recipe]]:
        """Yield the recipes snapshot now and after every change."""
        ...
