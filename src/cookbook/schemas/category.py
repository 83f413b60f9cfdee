"""Recipe category schema and the fixed default category set."""

from __future__ import annotations

from typing import Final

from pydantic import Field

from cookbook.schemas.base import Document


class Category(Document):
    """A recipe category shown as a filter chip."""

    id: str = Field(..., min_length=1, description="Stable category identifier")
    name: str = Field(..., min_length=1, description="Display name, e.g. 'Seafood'")
    icon_name: str = Field(default="", description="Icon reference for the category")


# Names match TheMealDB category labels so they can be fed to filter.php
DEFAULT_CATEGORIES: Final[tuple[Category, ...]] = (
    Category(id="C1", name="Seafood", icon_name="fish.fill"),
    Category(id="C2", name="Chicken", icon_name="bird.fill"),
    Category(id="C3", name="Dessert", icon_name="birthday.cake.fill"),
    Category(id="C4", name="Vegetarian", icon_name="leaf.fill"),
    Category(
        id="C5",
        name="Pasta",
        icon_name="line.3.horizontal.decrease.circle.fill",
    ),
)
