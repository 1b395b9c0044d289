"""Tests for CORS and security headers middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from address_news.api.middleware import SecurityHeadersMiddleware, setup_cors
from address_news.core.config import Settings


def _create_test_app() -> FastAPI:
    """Create a minimal FastAPI app for middleware testing."""
    app = FastAPI()

    @app.get("/test")
    async def test_route() -> dict:
        return {"ok": True}

    return app


class TestSecurityHeadersMiddleware:
    """Tests for SecurityHeadersMiddleware."""

    @pytest.fixture
    def client(self) -> TestClient:
        app = _create_test_app()
        app.add_middleware(SecurityHeadersMiddleware)
        return TestClient(app)

    def test_x_content_type_options(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_x_frame_options(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_referrer_policy(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["Referrer-Policy"] == "no-referrer"


class TestCors:
    """Tests for setup_cors."""

    def test_allowed_origin_echoed(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None, cors_origins="http://localhost:3000"))
        client = TestClient(app)

        response = client.get("/test", headers={"Origin": "http://localhost:3000"})

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_unlisted_origin_not_allowed(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None, cors_origins="http://localhost:3000"))
        client = TestClient(app)

        response = client.get("/test", headers={"Origin": "http://evil.example.com"})

        assert "access-control-allow-origin" not in response.headers

    def test_origin_regex(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None, cors_origin_regex=r"https://.*\.example\.com"))
        client = TestClient(app)

        response = client.get("/test", headers={"Origin": "https://app.example.com"})

        assert response.headers["access-control-allow-origin"] == "https://app.example.com"
