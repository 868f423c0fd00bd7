"""Tests for the ATS Resume API application."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from ats_resume.api.main import app
from ats_resume.config import RenderAssets
from ats_resume.services.pdf_exporter import PdfExporter


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.json()["status"] == "healthy"

    def test_health_reports_render_settings(self, client: TestClient) -> None:
        body = client.get("/health").json()
        assert body["template"] == app.state.settings.template_name
        assert body["pdf_timeout"] == app.state.settings.pdf_timeout


class TestAppConfiguration:
    """Tests for the FastAPI app configuration."""

    def test_app_title(self) -> None:
        assert app.title == "ATS Resume API"

    def test_app_version(self) -> None:
        assert app.version == "0.1.0"

    def test_cors_middleware_is_configured(self) -> None:
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes

    def test_lifespan_loads_assets_once(self, client: TestClient) -> None:
        assert isinstance(app.state.render_assets, RenderAssets)
        assert isinstance(app.state.pdf_exporter, PdfExporter)


class TestInvalidRoutes:
    """Tests for handling invalid routes."""

    def test_unknown_route_returns_404(self, client: TestClient) -> None:
        response = client.get("/nonexistent")
        assert response.status_code == 404

    def test_export_requires_post(self, client: TestClient) -> None:
        response = client.get("/api/export-pdf")
        assert response.status_code == 405
