"""Unit tests for API dependencies."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from cookbook.api.dependencies import (
    get_app_settings,
    get_catalog_service,
    get_catalog_store,
    get_favorites_service,
    get_mealdb_client,
    get_seeder,
)
from cookbook.core.exceptions import ServiceUnavailableException


pytestmark = pytest.mark.unit


def _request(**state: object) -> MagicMock:
    request = MagicMock()
    request.app.state = SimpleNamespace(**state)
    return request


class TestStateDependencies:
    """Tests for services read from app state."""

    @pytest.mark.parametrize(
        ("dependency", "attribute"),
        [
            (get_mealdb_client, "mealdb_client"),
            (get_catalog_store, "catalog_store"),
            (get_catalog_service, "catalog_service"),
            (get_favorites_service, "favorites_service"),
            (get_seeder, "seeder"),
        ],
    )
    async def test_returns_service_from_state(self, dependency, attribute) -> None:
        """Should return the service stored on app state."""
        service = MagicMock()

        assert await dependency(_request(**{attribute: service})) is service

    @pytest.mark.parametrize(
        "dependency",
        [
            get_mealdb_client,
            get_catalog_store,
            get_catalog_service,
            get_favorites_service,
            get_seeder,
        ],
    )
    async def test_missing_service_is_unavailable(self, dependency) -> None:
        """Should raise 503 when the service was never initialized."""
        with pytest.raises(ServiceUnavailableException) as exc_info:
            await dependency(_request())

        assert exc_info.value.status_code == 503


class TestGetAppSettings:
    """Tests for get_app_settings."""

    async def test_prefers_app_settings(self) -> None:
        """Should return the settings the app was created with."""
        settings = MagicMock()

        assert await get_app_settings(_request(settings=settings)) is settings

    async def test_falls_back_to_global_settings(self) -> None:
        """Should load settings when the app has none."""
        settings = MagicMock()
        with patch("cookbook.api.dependencies.get_settings", return_value=settings):
            assert await get_app_settings(_request()) is settings
