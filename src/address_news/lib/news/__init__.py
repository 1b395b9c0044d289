"""News library — pluggable news providers for an address.

Public API:
    - BaseNewsProvider: Abstract provider interface
    - NewsResult / NewsArticle: Result dataclasses
    - NewsProviderError: Provider failure
    - SimulatedNewsProvider: Template-filling provider
"""

from address_news.lib.news.base import BaseNewsProvider, NewsArticle, NewsProviderError, NewsResult
from address_news.lib.news.simulated import SimulatedNewsProvider

__all__ = [
    "BaseNewsProvider",
    "NewsArticle",
    "NewsProviderError",
    "NewsResult",
    "SimulatedNewsProvider",
]
