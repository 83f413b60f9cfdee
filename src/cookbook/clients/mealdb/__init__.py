"""TheMealDB API client package.

Fetches recipes by random pick, name search and category, and maps them to
normalized Recipe records.
"""

from cookbook.clients.mealdb.client import MealDBClient
from cookbook.clients.mealdb.exceptions import (
    RecipeSourceDecodingError,
    RecipeSourceError,
    RecipeSourceInvalidRequestError,
    RecipeSourceNoDataError,
    RecipeSourceParseError,
    RecipeSourceResponseError,
    RecipeSourceTimeoutError,
    RecipeSourceUnavailableError,
)
from cookbook.clients.mealdb.mapper import map_meal


__all__ = [
    "MealDBClient",
    "RecipeSourceDecodingError",
    "RecipeSourceError",
    "RecipeSourceInvalidRequestError",
    "RecipeSourceNoDataError",
    "RecipeSourceParseError",
    "RecipeSourceResponseError",
    "RecipeSourceTimeoutError",
    "RecipeSourceUnavailableError",
    "map_meal",
]
