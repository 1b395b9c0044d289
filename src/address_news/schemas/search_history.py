"""Search history Pydantic v2 request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from address_news.schemas.address import AddressStats
from address_news.schemas.common import CamelModel, SuccessResponse


class SearchHistoryCreate(CamelModel):
    """Fields recorded for one search request."""

    search_query: str
    results_count: int = Field(ge=0)
    search_duration_ms: int = Field(ge=0)


class SearchHistoryRecord(CamelModel):
    """A single search history entry."""

    id: UUID
    user_id: int
    address_id: UUID
    search_query: str
    results_count: int
    search_duration_ms: int
    created_at: datetime


class SearchHistoryWithAddress(SearchHistoryRecord):
    """History entry enriched with its owning address."""

    address_text: str
    city: str | None = None
    state: str | None = None


class SearchStats(CamelModel):
    """Aggregate search statistics for a user."""

    total_searches: int = 0
    avg_results_count: float | None = None
    avg_duration_ms: float | None = None
    first_search: datetime | None = None
    last_search: datetime | None = None


class CombinedStats(CamelModel):
    """Address and search statistics side by side."""

    addresses: AddressStats
    searches: SearchStats


class StatsResponse(SuccessResponse):
    """Statistics for a user."""

    stats: CombinedStats


class UserHistoryResponse(SuccessResponse):
    """Search history for a user, newest first."""

    history: list[SearchHistoryWithAddress]


class AddressHistoryResponse(SuccessResponse):
    """Search history for one address, newest first."""

    history: list[SearchHistoryRecord]
