"""Map raw TheMealDB meal objects to normalized Recipe records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from cookbook.schemas.recipe import Recipe


INGREDIENT_SLOTS: Final[int] = 20


def _text(meal: Mapping[str, Any], key: str) -> str:
    """Return a string field, or "" when absent, null or not a string."""
    value = meal.get(key)
    return value if isinstance(value, str) else ""


def ingredient_slot(meal: Mapping[str, Any], index: int) -> str | None:
    """Return the display string for one numbered slot, or None if empty.

    The measure comes first: ``"1 tsp Salt"``. A missing measure leaves
    just the ingredient name.
    """
    name = _text(meal, f"strIngredient{index}").strip()
    if not name:
        return None
    measure = _text(meal, f"strMeasure{index}").strip()
    return f"{measure} {name}".strip()


def extract_ingredients(meal: Mapping[str, Any]) -> list[str]:
    """Scan the fixed ingredient slots in order, skipping empty ones."""
    ingredients = []
    for index in range(1, INGREDIENT_SLOTS + 1):
        entry = ingredient_slot(meal, index)
        if entry is not None:
            ingredients.append(entry)
    return ingredients


def map_meal(meal: Mapping[str, Any]) -> Recipe | None:
    """Map a meal object to a Recipe.

    Returns:
        The Recipe, or None when ``idMeal`` or ``strMeal`` is missing or
        blank. Callers decide whether None means "skip" or "fail".
    """
    meal_id = _text(meal, "idMeal")
    title = _text(meal, "strMeal")
    if not meal_id.strip() or not title.strip():
        return None

    return Recipe(
        id=meal_id,
        title=title,
        image_url=_text(meal, "strMealThumb"),
        category=_text(meal, "strCategory"),
        cuisine=_text(meal, "strArea"),
        ingredients=extract_ingredients(meal),
        instructions=_text(meal, "strInstructions"),
        is_favorite=False,
    )
