"""FastAPI dependency injection for database sessions, news providers, and caller identity."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from address_news.core.config import Settings, get_settings
from address_news.core.database import get_session_factory
from address_news.core.errors import InvalidInputError
from address_news.lib.news import BaseNewsProvider, SimulatedNewsProvider


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


def get_news_provider(
    settings: Annotated[Settings, Depends(get_settings)],
) -> BaseNewsProvider:
    """Return the news provider used for address searches."""
    return SimulatedNewsProvider(delay=settings.news_simulated_delay)


def resolve_user_id(user_id: int | None, settings: Settings) -> int:
    """Return the explicit caller id, or the configured default.

    Args:
        user_id: Caller id supplied with the request, if any.
        settings: Application settings.

    Returns:
        The effective user id.

    Raises:
        InvalidInputError: If no id was supplied and no default is configured.
    """
    if user_id is not None:
        return user_id
    if settings.default_user_id is None:
        msg = "userId is required"
        raise InvalidInputError(msg)
    return settings.default_user_id


def get_caller_id(
    settings: Annotated[Settings, Depends(get_settings)],
    user_id: Annotated[int | None, Query(alias="userId", description="Caller id")] = None,
) -> int:
    """Resolve the caller id from the ``userId`` query parameter."""
    return resolve_user_id(user_id, settings)
