"""Abstract news provider interface and result types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from address_news.lib.address import ParsedAddress


@dataclass(frozen=True)
class NewsArticle:
    """A single news article tied to a location."""

    title: str
    description: str
    source: str
    published_at: datetime
    url: str
    image: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the API's camelCase keys."""
        return {
            "title": self.title,
            "description": self.description,
            "source": self.source,
            "publishedAt": self.published_at.isoformat(),
            "url": self.url,
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NewsArticle":
        """Build an article from an API payload."""
        return cls(
            title=data["title"],
            description=data["description"],
            source=data["source"],
            published_at=datetime.fromisoformat(data["publishedAt"]),
            url=data["url"],
            image=data["image"],
        )


@dataclass(frozen=True)
class NewsResult:
    """Articles found for an address, with a display location."""

    address: str
    location: str
    articles: list[NewsArticle] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the API's camelCase keys."""
        return {
            "address": self.address,
            "location": self.location,
            "articles": [article.to_dict() for article in self.articles],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NewsResult":
        """Build a result from an API payload."""
        return cls(
            address=data["address"],
            location=data["location"],
            articles=[NewsArticle.from_dict(a) for a in data.get("articles", [])],
        )


class NewsProviderError(Exception):
    """Raised when a news provider cannot produce results.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
    """

    def __init__(self, provider_name: str, message: str) -> None:
        self.provider_name = provider_name
        self.message = message
        super().__init__(f"{provider_name}: {message}")


class BaseNewsProvider(ABC):
    """Abstract news provider. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider."""

    @abstractmethod
    async def fetch(self, address: ParsedAddress) -> NewsResult:
        """Find news for a parsed address.

        Args:
            address: Normalized address components.

        Returns:
            NewsResult with zero or more articles.

        Raises:
            NewsProviderError: If the provider fails.
        """
