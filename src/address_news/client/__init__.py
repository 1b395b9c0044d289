"""Presentation-side client for the address news API.

Public API:
    - AddressNewsClient: Async API client with local fallback
    - ConnectionStatus: checking / connected / disconnected indicator
    - SearchView: Result rendered by the results view
"""

from address_news.client.api_client import AddressNewsClient, ConnectionStatus, SearchView, health_url_for

__all__ = [
    "AddressNewsClient",
    "ConnectionStatus",
    "SearchView",
    "health_url_for",
]
