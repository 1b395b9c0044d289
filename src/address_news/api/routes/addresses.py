"""Address API endpoints.

POST /addresses/search, GET /addresses, GET /addresses/stats,
GET /addresses/history, GET|PATCH|DELETE /addresses/{id},
GET /addresses/{id}/history.
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from address_news.core.config import Settings, get_settings
from address_news.core.dependencies import get_async_session, get_caller_id, get_news_provider, resolve_user_id
from address_news.core.errors import AddressNotFoundError
from address_news.lib.news import BaseNewsProvider
from address_news.schemas.address import (
    AddressDeleteResponse,
    AddressDetailResponse,
    AddressListResponse,
    AddressResponse,
    AddressUpdateRequest,
)
from address_news.schemas.common import ErrorResponse
from address_news.schemas.search import (
    AddressSearchRequest,
    AddressSearchResponse,
    NewsResponse,
    SearchSummary,
)
from address_news.schemas.search_history import (
    AddressHistoryResponse,
    CombinedStats,
    SearchHistoryRecord,
    StatsResponse,
    UserHistoryResponse,
)
from address_news.services import address_service, search_history_service
from address_news.services.search_service import search_by_address

addresses_router = APIRouter(prefix="/addresses", tags=["addresses"])


MAX_HISTORY_LIMIT = 500

_INVALID = {400: {"model": ErrorResponse, "description": "Missing or malformed input"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Address not found"}}
_FAILED = {500: {"model": ErrorResponse, "description": "Storage or search failure"}}


def _not_found(address_id: object) -> AddressNotFoundError:
    return AddressNotFoundError(f"Address {address_id} not found")


def _parse_address_id(address_id: str) -> uuid.UUID:
    """Parse a path id; ids that are not UUIDs cannot exist and map to 404."""
    try:
        return uuid.UUID(address_id)
    except ValueError:
        raise _not_found(address_id) from None


def _history_limit(limit: int | None, default: int) -> int:
    """Fall back to the default for a missing or non-positive limit."""
    if limit is None or limit < 1:
        return default
    return limit


# ---------------------------------------------------------------------------
# Fixed-path routes (declared BEFORE parameterized /{address_id} routes)
# ---------------------------------------------------------------------------

@addresses_router.post(
    "/search",
    response_model=AddressSearchResponse,
    responses={**_INVALID, **_FAILED},
)
async def search_address(
    request: AddressSearchRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    provider: Annotated[BaseNewsProvider, Depends(get_news_provider)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AddressSearchResponse:
    """Store or update the address, record the search, and return local news."""
    user_id = resolve_user_id(request.user_id, settings)
    outcome = await search_by_address(session, user_id, request.address, provider)
    return AddressSearchResponse(
        address=AddressResponse.model_validate(outcome.address),
        news=NewsResponse.model_validate(outcome.news),
        search_stats=SearchSummary(
            duration=outcome.duration_ms,
            results_count=outcome.results_count,
            search_count=outcome.search_count,
        ),
    )


@addresses_router.get("", response_model=AddressListResponse, responses={**_INVALID, **_FAILED})
async def list_addresses(
    user_id: Annotated[int, Depends(get_caller_id)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> AddressListResponse:
    """List the caller's addresses, most recently searched first."""
    addresses = await address_service.list_by_user(session, user_id)
    return AddressListResponse(addresses=[AddressResponse.model_validate(a) for a in addresses])


@addresses_router.get("/stats", response_model=StatsResponse, responses={**_INVALID, **_FAILED})
async def get_stats(
    user_id: Annotated[int, Depends(get_caller_id)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> StatsResponse:
    """Get address and search statistics for the caller."""
    address_stats = await address_service.get_search_stats(session, user_id)
    search_stats = await search_history_service.get_stats(session, user_id)
    return StatsResponse(stats=CombinedStats(addresses=address_stats, searches=search_stats))


@addresses_router.get("/history", response_model=UserHistoryResponse, responses={**_INVALID, **_FAILED})
async def get_history(
    user_id: Annotated[int, Depends(get_caller_id)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    limit: Annotated[int | None, Query(le=MAX_HISTORY_LIMIT, description="Non-positive values use the default")] = None,
) -> UserHistoryResponse:
    """Get the caller's search history, newest first."""
    history = await search_history_service.list_by_user(
        session, user_id, _history_limit(limit, settings.history_limit)
    )
    return UserHistoryResponse(history=history)


# ---------------------------------------------------------------------------
# Parameterized routes
# ---------------------------------------------------------------------------


@addresses_router.get("/{address_id}", response_model=AddressDetailResponse, responses={**_NOT_FOUND, **_FAILED})
async def get_address(
    address_id: str,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> AddressDetailResponse:
    """Get a single address."""
    address = await address_service.get_address(session, _parse_address_id(address_id))
    if address is None:
        raise _not_found(address_id)
    return AddressDetailResponse(address=AddressResponse.model_validate(address))


@addresses_router.get(
    "/{address_id}/history",
    response_model=AddressHistoryResponse,
    responses={**_NOT_FOUND, **_FAILED},
)
async def get_address_history(
    address_id: str,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    limit: Annotated[int | None, Query(le=MAX_HISTORY_LIMIT, description="Non-positive values use the default")] = None,
) -> AddressHistoryResponse:
    """Get the search history of one address, newest first."""
    parsed_id = _parse_address_id(address_id)
    if await address_service.get_address(session, parsed_id) is None:
        raise _not_found(address_id)
    records = await search_history_service.list_by_address(
        session, parsed_id, _history_limit(limit, settings.address_history_limit)
    )
    return AddressHistoryResponse(history=[SearchHistoryRecord.model_validate(r) for r in records])


@addresses_router.patch(
    "/{address_id}",
    response_model=AddressDetailResponse,
    responses={**_INVALID, **_NOT_FOUND, **_FAILED},
)
async def update_address(
    address_id: str,
    request: AddressUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> AddressDetailResponse:
    """Patch fields of an address; only fields present in the body change."""
    address = await address_service.update_address(
        session, _parse_address_id(address_id), request.model_dump(exclude_unset=True)
    )
    if address is None:
        raise _not_found(address_id)
    return AddressDetailResponse(address=AddressResponse.model_validate(address))


@addresses_router.delete("/{address_id}", response_model=AddressDeleteResponse, responses={**_NOT_FOUND, **_FAILED})
async def delete_address(
    address_id: str,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> AddressDeleteResponse:
    """Delete an address and its search history."""
    address = await address_service.delete_address(session, _parse_address_id(address_id))
    if address is None:
        raise _not_found(address_id)
    return AddressDeleteResponse(
        message="Address deleted successfully",
        address=AddressResponse.model_validate(address),
    )
