"""Unit tests for the application factory."""

from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from cookbook.core.config import Settings
from cookbook.core.config.settings import ApiSettings
from cookbook.factory import create_app


pytestmark = pytest.mark.unit


class TestCreateApp:
    """Tests for create_app."""

    def test_uses_app_settings(self) -> None:
        """Should configure title and version from settings."""
        settings = Settings()

        app = create_app(settings)

        assert app.title == settings.app.name
        assert app.version == settings.app.version
        assert app.state.settings is settings

    def test_docs_enabled_outside_production(self) -> None:
        """Should expose API docs in non-production environments."""
        app = create_app(Settings(APP_ENV="test"))

        assert app.docs_url == "/docs"

    def test_docs_disabled_in_production(self) -> None:
        """Should hide API docs in production."""
        app = create_app(Settings(APP_ENV="production"))

        assert app.docs_url is None
        assert app.openapi_url is None

    def test_mounts_routes_under_prefix(self) -> None:
        """Should mount the v1 routes under the configured prefix."""
        app = create_app(Settings(api=ApiSettings(v1_prefix="/api/v1/test")))
        paths = set(app.openapi()["paths"])

        assert "/api/v1/test/health" in paths
        assert "/api/v1/test/recipes/random" in paths
        assert "/api/v1/test/recipes/stream" in paths
        assert "/api/v1/test/recipes/{recipe_id}/favorite" in paths
        assert "/api/v1/test/categories/{name}/recipes" in paths
        assert "/api/v1/test/admin/seed" in paths

    def test_root_endpoint(self) -> None:
        """Should describe the service at the root path."""
        settings = Settings()
        client = TestClient(create_app(settings))

        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "service": settings.app.name,
            "version": settings.app.version,
            "docs": "/docs",
        }
