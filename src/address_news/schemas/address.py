"""Address Pydantic v2 request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from address_news.schemas.common import CamelModel, SuccessResponse


class AddressResponse(CamelModel):
    """A stored address."""

    id: UUID
    user_id: int
    address_text: str
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    search_count: int
    created_at: datetime
    last_searched_at: datetime


class AddressUpdateRequest(CamelModel):
    """Partial update of an address; only fields present in the body are applied."""

    address_text: str | None = Field(default=None, min_length=1)
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class AddressStats(CamelModel):
    """Aggregate address statistics for a user."""

    total_addresses: int = 0
    total_queries: int = 0
    last_search: datetime | None = None
    unique_cities: int = 0
    unique_states: int = 0


class AddressListResponse(SuccessResponse):
    """All addresses for a user, most recently searched first."""

    addresses: list[AddressResponse]


class AddressDetailResponse(SuccessResponse):
    """A single address."""

    address: AddressResponse


class AddressDeleteResponse(SuccessResponse):
    """Confirmation of a deleted address."""

    message: str
    address: AddressResponse
