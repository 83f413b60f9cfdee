"""Pydantic schemas for records, API bodies and downstream payloads."""

from cookbook.schemas.base import (
    APIRequest,
    APIResponse,
    Document,
    DownstreamResponse,
)
from cookbook.schemas.category import DEFAULT_CATEGORIES, Category
from cookbook.schemas.recipe import Recipe


__all__ = [
    "DEFAULT_CATEGORIES",
    "APIRequest",
    "APIResponse",
    "Category",
    "Document",
    "DownstreamResponse",
    "Recipe",
]
