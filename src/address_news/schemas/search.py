"""Address search Pydantic v2 request/response schemas."""

from datetime import datetime

from pydantic import Field

from address_news.schemas.address import AddressResponse
from address_news.schemas.common import CamelModel, SuccessResponse


class AddressSearchRequest(CamelModel):
    """Search body. ``address`` is validated by the service so blanks map to 400."""

    address: str | None = Field(default=None, description="Freeform address, e.g. 'Springfield, IL, USA, 62701'")
    user_id: int | None = Field(default=None, description="Caller id; the configured default applies when omitted")


class NewsArticleResponse(CamelModel):
    """A news article."""

    title: str
    description: str
    source: str
    published_at: datetime
    url: str
    image: str


class NewsResponse(CamelModel):
    """News found for an address."""

    address: str
    location: str
    articles: list[NewsArticleResponse]


class SearchSummary(CamelModel):
    """Timing and count summary of a search."""

    duration: int = Field(description="Elapsed milliseconds from normalization to content lookup")
    results_count: int
    search_count: int = Field(description="The address's search count after this search")


class AddressSearchResponse(SuccessResponse):
    """Result of an address search."""

    address: AddressResponse
    news: NewsResponse
    search_stats: SearchSummary
