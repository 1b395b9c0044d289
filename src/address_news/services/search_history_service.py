"""Search history service — append-only search log, reporting, and retention."""

import uuid
from datetime import timedelta

from loguru import logger
from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from address_news.core.errors import AddressReferenceError, InvalidInputError, translate_storage_errors
from address_news.models.address import Address
from address_news.models.base import utcnow
from address_news.models.search_history import SearchHistory
from address_news.schemas.search_history import (
    SearchHistoryCreate,
    SearchHistoryRecord,
    SearchHistoryWithAddress,
    SearchStats,
)


def _joined_history() -> Select:
    """History rows joined to the owning address's text, city, and state."""
    return select(SearchHistory, Address.address_text, Address.city, Address.state).join(
        Address, SearchHistory.address_id == Address.id
    )


def _with_address(rows: list) -> list[SearchHistoryWithAddress]:
    return [
        SearchHistoryWithAddress(
            **SearchHistoryRecord.model_validate(entry).model_dump(),
            address_text=address_text,
            city=city,
            state=state,
        )
        for entry, address_text, city, state in rows
    ]


@translate_storage_errors
async def record_search(
    session: AsyncSession,
    user_id: int,
    address_id: uuid.UUID,
    entry: SearchHistoryCreate,
) -> SearchHistory:
    """Append a search history row.

    Args:
        session: Database session.
        user_id: User who searched.
        address_id: Address the search resolved to.
        entry: Query text, result count, and duration.

    Returns:
        The stored SearchHistory row.

    Raises:
        AddressReferenceError: If ``address_id`` does not reference an existing address.
    """
    record = SearchHistory(
        user_id=user_id,
        address_id=address_id,
        search_query=entry.search_query,
        results_count=entry.results_count,
        search_duration_ms=entry.search_duration_ms,
        created_at=utcnow(),
    )
    session.add(record)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning(f"Rejected search history for missing address {address_id}")
        raise AddressReferenceError(address_id) from exc
    return record


@translate_storage_errors
async def list_by_user(
    session: AsyncSession,
    user_id: int,
    limit: int = 50,
) -> list[SearchHistoryWithAddress]:
    """List a user's searches, newest first, enriched with address details.

    Args:
        session: Database session.
        user_id: User whose history to list.
        limit: Maximum entries returned.

    Returns:
        History entries with ``address_text``, ``city`` and ``state`` joined in.
    """
    result = await session.execute(
        _joined_history()
        .where(SearchHistory.user_id == user_id)
        .order_by(SearchHistory.created_at.desc())
        .limit(limit)
    )
    return _with_address(list(result.all()))


@translate_storage_errors
async def list_by_address(
    session: AsyncSession,
    address_id: uuid.UUID,
    limit: int = 20,
) -> list[SearchHistory]:
    """List searches for one address, newest first."""
    result = await session.execute(
        select(SearchHistory)
        .where(SearchHistory.address_id == address_id)
        .order_by(SearchHistory.created_at.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


@translate_storage_errors
async def get_stats(session: AsyncSession, user_id: int) -> SearchStats:
    """Aggregate a user's search history.

    Args:
        session: Database session.
        user_id: User whose history to aggregate.

    Returns:
        SearchStats; averages and timestamps are None when there is no history.
    """
    result = await session.execute(
        select(
            func.count(SearchHistory.id),
            func.avg(SearchHistory.results_count),
            func.avg(SearchHistory.search_duration_ms),
            func.min(SearchHistory.created_at),
            func.max(SearchHistory.created_at),
        ).where(SearchHistory.user_id == user_id)
    )
    total, avg_results, avg_duration, first_search, last_search = result.one()
    return SearchStats(
        total_searches=total,
        avg_results_count=float(avg_results) if avg_results is not None else None,
        avg_duration_ms=float(avg_duration) if avg_duration is not None else None,
        first_search=first_search,
        last_search=last_search,
    )


@translate_storage_errors
async def get_recent_searches(
    session: AsyncSession,
    user_id: int,
    within_days: int = 7,
) -> list[SearchHistoryWithAddress]:
    """List a user's searches from the last ``within_days`` days, newest first."""
    cutoff = utcnow() - timedelta(days=within_days)
    result = await session.execute(
        _joined_history()
        .where(SearchHistory.user_id == user_id, SearchHistory.created_at >= cutoff)
        .order_by(SearchHistory.created_at.desc())
    )
    return _with_address(list(result.all()))


@translate_storage_errors
async def purge_older_than(session: AsyncSession, days: int = 90) -> int:
    """Delete all search history created more than ``days`` days ago.

    Args:
        session: Database session.
        days: Retention window in days.

    Returns:
        Number of rows removed.

    Raises:
        InvalidInputError: If ``days`` is negative.
    """
    if days < 0:
        msg = f"Retention window must be non-negative, got {days}"
        raise InvalidInputError(msg)

    cutoff = utcnow() - timedelta(days=days)
    result = await session.execute(
        delete(SearchHistory)
        .where(SearchHistory.created_at < cutoff)
        .execution_options(synchronize_session=False)
    )
    await session.commit()
    removed = result.rowcount
    logger.info(f"Purged {removed} search history rows older than {days} days")
    return removed
