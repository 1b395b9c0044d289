"""Simulated news provider that fills fixed article templates."""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from address_news.lib.address import ParsedAddress
from address_news.lib.news.base import BaseNewsProvider, NewsArticle, NewsResult

UNKNOWN_CITY = "Unknown City"
UNKNOWN_STATE = "Unknown State"

# (title, description, source, image) with {city} placeholders; article N is
# published N days before "now".
_TEMPLATES: tuple[tuple[str, str, str, str], ...] = (
    (
        "Local Development Plans Announced for {city}",
        "City officials have announced new development plans that will transform the downtown area of {city}.",
        "Local News",
        "https://images.unsplash.com/photo-1449824913935-59a10b8d2000?w=400&h=200&fit=crop",
    ),
    (
        "{city} Community Center Receives State Grant",
        "The {city} Community Center has been awarded a significant state grant for facility improvements.",
        "State News",
        "https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?w=400&h=200&fit=crop",
    ),
    (
        "New Business District Opens in {city}",
        "A new business district featuring local shops and restaurants has opened in the heart of {city}.",
        "Business News",
        "https://images.unsplash.com/photo-1441986300917-64674bd600d8?w=400&h=200&fit=crop",
    ),
)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SimulatedNewsProvider(BaseNewsProvider):
    """Stateless provider producing three templated articles per address.

    Args:
        delay: Artificial latency in seconds before returning.
        clock: Callable returning the current time; article dates derive from it.
    """

    def __init__(self, delay: float = 0.0, clock: Callable[[], datetime] = _utcnow) -> None:
        self._delay = delay
        self._clock = clock

    @property
    def provider_name(self) -> str:
        return "simulated"

    async def fetch(self, address: ParsedAddress) -> NewsResult:
        if self._delay > 0:
            await asyncio.sleep(self._delay)

        city = address.city or UNKNOWN_CITY
        state = address.state or UNKNOWN_STATE
        now = self._clock()

        articles = [
            NewsArticle(
                title=title.format(city=city),
                description=description.format(city=city),
                source=source,
                published_at=now - timedelta(days=age),
                url="#",
                image=image,
            )
            for age, (title, description, source, image) in enumerate(_TEMPLATES)
        ]
        return NewsResult(address=address.address_text, location=f"{city}, {state}", articles=articles)
