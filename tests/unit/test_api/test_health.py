"""Tests for the health endpoint."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from address_news.api.routes.health import health_router
from address_news.core.config import Settings, get_settings


async def test_health_reports_ok(settings: Settings) -> None:
    app = FastAPI()
    app.include_router(health_router)
    app.dependency_overrides[get_settings] = lambda: settings.model_copy(update={"environment": "test"})

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test"}
