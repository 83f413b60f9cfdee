"""Catalog store exceptions."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for catalog store errors."""


class CatalogUnavailableError(CatalogError):
    """Raised when the backing store cannot be reached."""


class CatalogNotInitializedError(CatalogError):
    """Raised when the store is used before initialize()."""
