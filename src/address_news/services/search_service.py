"""Search service — end-to-end "news by address" request orchestration."""

import time
from dataclasses import dataclass

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from address_news.core.errors import InvalidInputError, SearchError
from address_news.lib.address import parse_address
from address_news.lib.news import BaseNewsProvider, NewsResult
from address_news.models.address import Address
from address_news.schemas.search_history import SearchHistoryCreate
from address_news.services.address_service import upsert_address
from address_news.services.search_history_service import record_search


@dataclass
class SearchOutcome:
    """Result of one address search."""

    address: Address
    news: NewsResult
    duration_ms: int
    results_count: int

    @property
    def search_count(self) -> int:
        """The address's search count after this search."""
        return self.address.search_count


async def search_by_address(
    session: AsyncSession,
    user_id: int,
    raw_address: str | None,
    provider: BaseNewsProvider,
) -> SearchOutcome:
    """Record a search for an address and return news for it.

    The address upsert is committed before the provider is called and the
    history row is written last, so a failure after the upsert leaves the
    address without a history row. That state is accepted and not repaired.

    Args:
        session: Database session.
        user_id: Caller identity.
        raw_address: Address text exactly as submitted.
        provider: News provider used for the content lookup.

    Returns:
        SearchOutcome with the upserted address, news, and timing.

    Raises:
        InvalidInputError: If the address is missing or blank.
        SearchError: If the upsert, the content lookup, or the history append fails.
    """
    if raw_address is None or not raw_address.strip():
        msg = "Address is required"
        raise InvalidInputError(msg)

    started = time.perf_counter()
    parsed = parse_address(raw_address.strip())

    try:
        address = await upsert_address(session, user_id, parsed)
        news = await provider.fetch(parsed)
        duration_ms = int((time.perf_counter() - started) * 1000)
        await record_search(
            session,
            user_id,
            address.id,
            SearchHistoryCreate(
                search_query=raw_address,
                results_count=len(news.articles),
                search_duration_ms=duration_ms,
            ),
        )
    except Exception as exc:
        logger.error(f"Address search failed for user {user_id}: {exc}")
        raise SearchError(str(exc)) from exc

    logger.info(
        f"Search '{parsed.address_text}' by user {user_id}: {len(news.articles)} articles "
        f"from {provider.provider_name} in {duration_ms}ms (search #{address.search_count})"
    )
    return SearchOutcome(
        address=address,
        news=news,
        duration_ms=duration_ms,
        results_count=len(news.articles),
    )
