"""Unit tests for the TheMealDB meal mapper."""

from __future__ import annotations

from typing import Any

import pytest

from cookbook.clients.mealdb.mapper import (
    INGREDIENT_SLOTS,
    extract_ingredients,
    ingredient_slot,
    map_meal,
)
from tests.fixtures.mealdb_responses import make_meal


pytestmark = pytest.mark.unit


class TestIngredientSlot:
    """Tests for ingredient_slot."""

    def test_joins_measure_and_name(self) -> None:
        """Should put the measure before the ingredient name."""
        meal = make_meal(ingredients={1: ("Salt", "1 tsp")})

        assert ingredient_slot(meal, 1) == "1 tsp Salt"

    def test_missing_measure_gives_name_only(self) -> None:
        """Should return the bare name when the measure is empty or null."""
        meal = make_meal(ingredients={1: ("Eggs", ""), 2: ("Milk", None)})

        assert ingredient_slot(meal, 1) == "Eggs"
        assert ingredient_slot(meal, 2) == "Milk"

    def test_trims_each_part(self) -> None:
        """Should trim measure and name before joining."""
        meal = make_meal(ingredients={1: ("  Flour ", " 200g  ")})

        assert ingredient_slot(meal, 1) == "200g Flour"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_is_skipped(self, name: str | None) -> None:
        """Should return None when the ingredient name is empty, blank or null."""
        meal = make_meal(ingredients={1: (name, "1 cup")})

        assert ingredient_slot(meal, 1) is None

    def test_absent_keys_are_skipped(self) -> None:
        """Should return None when the slot keys are missing entirely."""
        assert ingredient_slot({"idMeal": "1", "strMeal": "X"}, 5) is None


class TestExtractIngredients:
    """Tests for extract_ingredients."""

    def test_scans_slots_in_order(self) -> None:
        """Should keep slot order and skip gaps."""
        meal = make_meal(
            ingredients={
                1: ("Butter", "50g"),
                3: ("Sugar", "100g"),
                INGREDIENT_SLOTS: ("Vanilla", "1 tsp"),
            }
        )

        assert extract_ingredients(meal) == ["50g Butter", "100g Sugar", "1 tsp Vanilla"]

    def test_single_filled_slot(self) -> None:
        """Should return one entry when only slot 3 is filled."""
        meal = make_meal(ingredients={3: ("Salt", "1 tsp")})

        assert extract_ingredients(meal) == ["1 tsp Salt"]

    def test_empty_measure_has_no_leading_space(self) -> None:
        """Should give just the name for an empty measure."""
        meal = make_meal(ingredients={1: ("Pepper", "")})

        assert extract_ingredients(meal) == ["Pepper"]

    def test_ignores_slots_beyond_limit(self) -> None:
        """Should not read past the last numbered slot."""
        meal = make_meal(ingredients={})
        meal[f"strIngredient{INGREDIENT_SLOTS + 1}"] = "Saffron"
        meal[f"strMeasure{INGREDIENT_SLOTS + 1}"] = "pinch"

        assert extract_ingredients(meal) == []

    def test_all_slots_filled(self) -> None:
        """Should return one entry per filled slot."""
        meal = make_meal(
            ingredients={i: (f"Item{i}", f"{i}g") for i in range(1, INGREDIENT_SLOTS + 1)}
        )

        result = extract_ingredients(meal)

        assert len(result) == INGREDIENT_SLOTS
        assert result[0] == "1g Item1"
        assert result[-1] == f"{INGREDIENT_SLOTS}g Item{INGREDIENT_SLOTS}"


class TestMapMeal:
    """Tests for map_meal."""

    def test_maps_all_fields(self, sample_meal: dict[str, Any]) -> None:
        """Should map a full meal object to a Recipe."""
        recipe = map_meal(sample_meal)

        assert recipe is not None
        assert recipe.id == "52772"
        assert recipe.title == "Teriyaki Chicken Casserole"
        assert recipe.image_url.endswith("wvpsxx1468256321.jpg")
        assert recipe.category == "Chicken"
        assert recipe.cuisine == "Japanese"
        assert recipe.ingredients == [
            "3/4 cup soy sauce",
            "1/2 cup water",
            "1/4 cup brown sugar",
        ]
        assert recipe.instructions == "Preheat oven to 350F. Combine and bake."
        assert recipe.is_favorite is False

    def test_missing_optional_fields_default_to_empty(self) -> None:
        """Should default absent or null text fields to empty strings."""
        recipe = map_meal(
            {"idMeal": "1", "strMeal": "Toast", "strArea": None, "strCategory": None}
        )

        assert recipe is not None
        assert recipe.image_url == ""
        assert recipe.category == ""
        assert recipe.cuisine == ""
        assert recipe.instructions == ""
        assert recipe.ingredients == []

    @pytest.mark.parametrize(
        ("meal_id", "title"),
        [
            (None, "Toast"),
            ("1", None),
            ("", "Toast"),
            ("1", "   "),
        ],
    )
    def test_missing_id_or_title_gives_none(
        self, meal_id: str | None, title: str | None
    ) -> None:
        """Should return None when the id or title is missing or blank."""
        assert map_meal(make_meal(meal_id, title)) is None

    def test_non_string_id_gives_none(self) -> None:
        """Should treat a non-string id as missing."""
        assert map_meal(make_meal(idMeal=52772)) is None

    def test_ignores_unknown_fields(self, sample_meal: dict[str, Any]) -> None:
        """Should ignore fields such as tags and video links."""
        recipe = map_meal(sample_meal)

        assert recipe is not None
        assert "strTags" not in recipe.to_document()
