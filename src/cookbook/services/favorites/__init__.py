"""Favorites service."""

from cookbook.services.favorites.service import FavoritesService


__all__ = ["FavoritesService"]
