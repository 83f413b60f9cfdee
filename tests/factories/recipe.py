"""Recipe and category factories for generating test data.

Uses polyfactory for consistent test data generation.
"""

from __future__ import annotations

from polyfactory.factories.pydantic_factory import ModelFactory

from cookbook.schemas.category import Category
from cookbook.schemas.recipe import Recipe


class RecipeFactory(ModelFactory[Recipe]):
    """Factory for generating Recipe instances."""

    __model__ = Recipe

    @classmethod
    def id(cls) -> str:
        """Numeric string id, as TheMealDB uses."""
        return str(cls.__random__.randint(52000, 53999))

    @classmethod
    def title(cls) -> str:
        """Non-blank title."""
        return cls.__random__.choice(
            ["Baked salmon with fennel", "Chicken Handi", "Apple Frangipan Tart"]
        )

    @classmethod
    def image_url(cls) -> str:
        """Thumbnail URL."""
        return "https://www.themealdb.com/images/media/meals/test.jpg"

    @classmethod
    def category(cls) -> str:
        """Default category."""
        return "Seafood"

    @classmethod
    def cuisine(cls) -> str:
        """Default cuisine."""
        return "British"

    @classmethod
    def ingredients(cls) -> list[str]:
        """Short ingredient list."""
        return ["2 medium Salmon", "1 tsp Salt"]

    @classmethod
    def instructions(cls) -> str:
        """Default instructions."""
        return "Heat oven to 200C. Bake for 20 minutes."

    @classmethod
    def is_favorite(cls) -> bool:
        """Fresh records are never favorites."""
        return False


class CategoryFactory(ModelFactory[Category]):
    """Factory for generating Category instances."""

    __model__ = Category

    @classmethod
    def id(cls) -> str:
        """Category id."""
        return "C1"

    @classmethod
    def name(cls) -> str:
        """Category name."""
        return "Seafood"

    @classmethod
    def icon_name(cls) -> str:
        """Icon reference."""
        return "fish.fill"
