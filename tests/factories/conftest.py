"""Factory configuration and exports.

This module exports all factories for convenient importing in tests.
"""

from tests.factories.recipe import CategoryFactory, RecipeFactory


__all__ = [
    "CategoryFactory",
    "RecipeFactory",
]
