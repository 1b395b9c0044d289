"""Address service — per-user address store with upsert-by-text semantics."""

import uuid
from datetime import datetime
from typing import Any

from loguru import logger
from sqlalchemy import distinct, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from address_news.core.errors import InvalidInputError, translate_storage_errors
from address_news.lib.address import ParsedAddress
from address_news.models.address import Address
from address_news.models.base import utcnow
from address_news.schemas.address import AddressStats

# Optional components refreshed on repeat searches only when the new value is present
_FILL_MISSING_FIELDS = ("city", "state", "country", "postal_code", "latitude", "longitude")

_UPDATABLE_FIELDS = frozenset(
    {
        "user_id",
        "address_text",
        "search_count",
        "last_searched_at",
        *_FILL_MISSING_FIELDS,
    }
)


def address_key(address_text: str) -> str:
    """Return the case-insensitive lookup key for an address text."""
    return address_text.lower()


def _dialect_insert(session: AsyncSession) -> Any:
    """Pick the dialect-specific INSERT construct that supports ON CONFLICT."""
    if session.get_bind().dialect.name == "sqlite":
        return sqlite_insert
    return pg_insert


def build_upsert(insert: Any, user_id: int, data: ParsedAddress, now: datetime) -> Any:
    """Build the find-or-create statement for one search.

    Args:
        insert: Dialect INSERT construct (PostgreSQL or SQLite) supporting ON CONFLICT.
        user_id: Owner of the address.
        data: Parsed address components.
        now: Timestamp stored as ``created_at`` and ``last_searched_at``.

    Returns:
        ``INSERT ... ON CONFLICT (user_id, address_key) DO UPDATE ... RETURNING`` statement.
    """
    stmt = insert(Address).values(
        user_id=user_id,
        address_key=address_key(data.address_text),
        search_count=1,
        created_at=now,
        last_searched_at=now,
        **data.to_dict(),
    )
    return stmt.on_conflict_do_update(
        index_elements=["user_id", "address_key"],
        set_={
            "search_count": Address.search_count + 1,
            "last_searched_at": stmt.excluded.last_searched_at,
            **{field: func.coalesce(stmt.excluded[field], getattr(Address, field)) for field in _FILL_MISSING_FIELDS},
        },
    ).returning(Address)


@translate_storage_errors
async def upsert_address(
    session: AsyncSession,
    user_id: int,
    data: ParsedAddress,
) -> Address:
    """Insert an address or bump the existing row for the same user and text.

    Runs as one ``INSERT ... ON CONFLICT (user_id, address_key) DO UPDATE``
    statement. On conflict the search count is incremented, the last-searched
    timestamp is refreshed, and each optional component keeps its stored value
    unless the incoming value is non-null.

    Args:
        session: Database session.
        user_id: Owner of the address.
        data: Parsed address components; ``address_text`` is the match key.

    Returns:
        The inserted or updated Address row.
    """
    stmt = build_upsert(_dialect_insert(session), user_id, data, utcnow())
    result = await session.execute(stmt, execution_options={"populate_existing": True})
    address = result.scalar_one()
    await session.commit()
    logger.debug(f"Upserted address {address.id} for user {user_id} (search #{address.search_count})")
    return address


@translate_storage_errors
async def get_by_user_and_text(
    session: AsyncSession,
    user_id: int,
    address_text: str,
) -> Address | None:
    """Look up a user's address by text, ignoring case.

    Args:
        session: Database session.
        user_id: Owner of the address.
        address_text: Address text to match.

    Returns:
        Address or None if not found.
    """
    result = await session.execute(
        select(Address).where(
            Address.user_id == user_id,
            Address.address_key == address_key(address_text),
        )
    )
    return result.scalar_one_or_none()


@translate_storage_errors
async def list_by_user(session: AsyncSession, user_id: int) -> list[Address]:
    """List a user's addresses, most recently searched first."""
    result = await session.execute(
        select(Address).where(Address.user_id == user_id).order_by(Address.last_searched_at.desc())
    )
    return list(result.scalars().all())


@translate_storage_errors
async def get_address(session: AsyncSession, address_id: uuid.UUID) -> Address | None:
    """Get an address by id."""
    return await session.get(Address, address_id)


@translate_storage_errors
async def update_address(
    session: AsyncSession,
    address_id: uuid.UUID,
    fields: dict[str, Any],
) -> Address | None:
    """Patch an address with the given column values.

    Changing ``address_text`` also re-derives the lookup key.

    Args:
        session: Database session.
        address_id: Address to update.
        fields: Column name -> new value.

    Returns:
        The updated Address, or None if the id does not exist.

    Raises:
        InvalidInputError: If a field name is not an updatable column or
            ``address_text`` is blank.
    """
    unknown = set(fields) - _UPDATABLE_FIELDS
    if unknown:
        msg = f"Unknown address fields: {', '.join(sorted(unknown))}"
        raise InvalidInputError(msg)
    if "address_text" in fields and not (fields["address_text"] or "").strip():
        msg = "address_text cannot be blank"
        raise InvalidInputError(msg)

    address = await session.get(Address, address_id)
    if address is None:
        return None

    for field_name, value in fields.items():
        setattr(address, field_name, value)
    if "address_text" in fields:
        address.address_key = address_key(fields["address_text"])

    await session.commit()
    await session.refresh(address)
    logger.info(f"Updated address {address.id}: {', '.join(sorted(fields))}")
    return address


@translate_storage_errors
async def delete_address(session: AsyncSession, address_id: uuid.UUID) -> Address | None:
    """Delete an address; its search history is removed by ON DELETE CASCADE.

    Args:
        session: Database session.
        address_id: Address to delete.

    Returns:
        The deleted Address, or None if the id does not exist.
    """
    address = await session.get(Address, address_id)
    if address is None:
        return None

    await session.delete(address)
    await session.commit()
    logger.info(f"Deleted address {address_id} for user {address.user_id}")
    return address


@translate_storage_errors
async def get_search_stats(session: AsyncSession, user_id: int) -> AddressStats:
    """Aggregate a user's addresses.

    Args:
        session: Database session.
        user_id: Owner of the addresses.

    Returns:
        AddressStats with address count, summed search counts, latest search
        time, and distinct city/state counts.
    """
    result = await session.execute(
        select(
            func.count(Address.id),
            func.coalesce(func.sum(Address.search_count), 0),
            func.max(Address.last_searched_at),
            func.count(distinct(Address.city)),
            func.count(distinct(Address.state)),
        ).where(Address.user_id == user_id)
    )
    total_addresses, total_queries, last_search, unique_cities, unique_states = result.one()
    return AddressStats(
        total_addresses=total_addresses,
        total_queries=int(total_queries),
        last_search=last_search,
        unique_cities=unique_cities,
        unique_states=unique_states,
    )
