"""Shared test fixtures and configuration for the Cookbook service tests.

This module provides pytest fixtures that are used across multiple test modules,
including sample TheMealDB payloads, sample records and settings isolation.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import pytest

# Select the test YAML environment before any settings are loaded
os.environ.setdefault("APP_ENV", "test")

from cookbook.core.config import get_settings
from cookbook.schemas.category import Category
from cookbook.schemas.recipe import Recipe
from tests.fixtures.mealdb_responses import make_meal


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None]:
    """Drop cached settings so environment overrides take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_meal() -> dict[str, Any]:
    """Full TheMealDB meal object with three ingredients."""
    return make_meal()


@pytest.fixture
def sample_recipe() -> Recipe:
    """Recipe as mapped from the sample meal."""
    return Recipe(
        id="52772",
        title="Teriyaki Chicken Casserole",
        image_url="https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
        category="Chicken",
        cuisine="Japanese",
        ingredients=["3/4 cup soy sauce", "1/2 cup water", "1/4 cup brown sugar"],
        instructions="Preheat oven to 350F. Combine and bake.",
    )


@pytest.fixture
def sample_category() -> Category:
    """Seafood category."""
    return Category(id="C1", name="Seafood", icon_name="fish.fill")
