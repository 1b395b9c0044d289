"""Domain exception hierarchy.

HTTP mapping (see ``address_news.api.router.setup_exception_handlers``):
InvalidInputError -> 400, AddressNotFoundError -> 404,
StorageError / SearchError -> 500 with the message passed through.
NetworkError and ApiResponseError are raised by the HTTP client only.
"""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

P = ParamSpec("P")
R = TypeVar("R")


class AddressNewsError(Exception):
    """Base class for all address news errors."""


class InvalidInputError(AddressNewsError, ValueError):
    """Raised when caller input is missing, blank, or malformed."""


class AddressNotFoundError(AddressNewsError, LookupError):
    """Raised when an address id does not exist."""


class StorageError(AddressNewsError):
    """Raised when the backing store fails."""


class AddressReferenceError(StorageError):
    """Raised when a history entry references an address that does not exist."""

    def __init__(self, address_id: object) -> None:
        self.address_id = address_id
        super().__init__(f"Address {address_id} does not exist")


class SearchError(AddressNewsError):
    """Raised when an address search fails after validation."""


def translate_storage_errors(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Re-raise SQLAlchemy failures from an async store function as StorageError.

    Args:
        func: Coroutine function performing database work.

    Returns:
        Wrapped coroutine function.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error(f"Storage failure in {func.__name__}: {exc}")
            raise StorageError(str(exc)) from exc

    return wrapper


class NetworkError(AddressNewsError):
    """Raised by the client when the API cannot be reached."""


class ApiResponseError(AddressNewsError):
    """Raised by the client when the API answers with an error status.

    Args:
        status_code: HTTP status returned by the API.
        detail: Error detail from the response body.
    """

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")
