"""HTTP client for the address news API with offline fallback.

The client probes ``/health`` once to decide whether the API is reachable.
While disconnected, searches are answered locally by the simulated news
provider so callers always get a result of the same shape.
"""

from dataclasses import dataclass
from enum import StrEnum
from types import TracebackType
from typing import Any

import httpx
from loguru import logger

from address_news.core.errors import ApiResponseError, InvalidInputError, NetworkError
from address_news.lib.address import parse_address
from address_news.lib.news import BaseNewsProvider, NewsResult, SimulatedNewsProvider

DEFAULT_TIMEOUT = 10.0


class ConnectionStatus(StrEnum):
    """Reachability of the API as last observed by the client."""

    CHECKING = "checking"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


@dataclass
class SearchView:
    """What the results view renders for one search."""

    news: NewsResult
    search_stats: dict[str, Any] | None = None
    source: str = "api"

    @property
    def is_local(self) -> bool:
        """Whether the result came from the local fallback."""
        return self.source == "local"


def health_url_for(api_base_url: str) -> str:
    """Derive the liveness probe URL from the API base URL.

    ``http://host:8000/api`` -> ``http://host:8000/health``.
    """
    base = api_base_url.rstrip("/")
    return f"{base.removesuffix('/api')}/health"


class AddressNewsClient:
    """Async client for the address news API.

    Args:
        base_url: API base URL, e.g. ``http://localhost:8000/api``.
        timeout: Per-request timeout in seconds.
        user_id: Caller id sent with every request; the server default applies when None.
        fallback_provider: Provider used while the API is unreachable.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_id: int | None = None,
        fallback_provider: BaseNewsProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._user_id = user_id
        self._fallback = fallback_provider or SimulatedNewsProvider()
        self._http = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )
        self.status = ConnectionStatus.CHECKING

    async def __aenter__(self) -> "AddressNewsClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------

    async def check_connection(self) -> ConnectionStatus:
        """Probe the API's health endpoint and record the result.

        Returns:
            CONNECTED if the probe answered 2xx, otherwise DISCONNECTED.
        """
        url = health_url_for(self._base_url)
        try:
            response = await self._http.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"API not available at {url} ({e.__class__.__name__}), using local results")
            self.status = ConnectionStatus.DISCONNECTED
        else:
            self.status = ConnectionStatus.CONNECTED
        return self.status

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, address: str) -> SearchView:
        """Search news for an address through the API, or locally when offline.

        Args:
            address: Freeform address text.

        Returns:
            SearchView with the news result; ``search_stats`` is only present
            for API results.

        Raises:
            InvalidInputError: If the address is blank.
            ApiResponseError: If the API rejects or fails the search.
        """
        if not address or not address.strip():
            msg = "Address is required"
            raise InvalidInputError(msg)

        if self.status == ConnectionStatus.CHECKING:
            await self.check_connection()

        if self.status == ConnectionStatus.CONNECTED:
            payload: dict[str, Any] = {"address": address}
            if self._user_id is not None:
                payload["userId"] = self._user_id
            try:
                data = await self._request("POST", "/addresses/search", json=payload)
            except NetworkError:
                logger.warning("API became unreachable, falling back to local results")
                self.status = ConnectionStatus.DISCONNECTED
            else:
                return SearchView(
                    news=NewsResult.from_dict(data["news"]),
                    search_stats=data.get("searchStats"),
                    source="api",
                )

        news = await self._fallback.fetch(parse_address(address.strip()))
        return SearchView(news=news, source="local")

    # ------------------------------------------------------------------
    # Address and history endpoints
    # ------------------------------------------------------------------

    async def list_addresses(self) -> list[dict[str, Any]]:
        """List the caller's addresses, most recently searched first."""
        data = await self._request("GET", "/addresses", params=self._user_params())
        return data["addresses"]

    async def get_address(self, address_id: str) -> dict[str, Any]:
        """Get a single address."""
        data = await self._request("GET", f"/addresses/{address_id}")
        return data["address"]

    async def get_stats(self) -> dict[str, Any]:
        """Get address and search statistics for the caller."""
        data = await self._request("GET", "/addresses/stats", params=self._user_params())
        return data["stats"]

    async def get_history(self, limit: int = 50) -> list[dict[str, Any]]:
        """Get the caller's search history, newest first."""
        params = {**self._user_params(), "limit": limit}
        data = await self._request("GET", "/addresses/history", params=params)
        return data["history"]

    async def delete_address(self, address_id: str) -> dict[str, Any]:
        """Delete an address and return the removed record."""
        data = await self._request("DELETE", f"/addresses/{address_id}")
        return data["address"]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _user_params(self) -> dict[str, int]:
        return {"userId": self._user_id} if self._user_id is not None else {}

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Send a request and return the decoded JSON body.

        Raises:
            NetworkError: On connection failures and timeouts.
            ApiResponseError: On non-2xx responses.
        """
        url = f"{self._base_url}{path}"
        logger.debug(f"API request: {method} {url}")
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"API request failed: {method} {url}: {e.__class__.__name__}")
            raise NetworkError(f"Could not reach {url}") from e

        logger.debug(f"API response: {response.status_code} {url}")
        if response.is_error:
            raise ApiResponseError(response.status_code, _error_detail(response))
        return response.json()


def _error_detail(response: httpx.Response) -> str:
    """Extract a human-readable error from an API error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        message = body.get("message")
        detail = body.get("detail")
        if isinstance(detail, str):
            return f"{detail}: {message}" if message else detail
    return str(body)
