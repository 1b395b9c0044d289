"""Liveness probe used by the client's connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends

from address_news.core.config import Settings, get_settings

health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, str]:
    """Report that the API process is up."""
    return {"status": "ok", "environment": settings.environment}
