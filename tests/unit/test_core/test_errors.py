"""Tests for the domain exception hierarchy."""

import uuid
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from address_news.core.errors import (
    AddressNewsError,
    AddressNotFoundError,
    AddressReferenceError,
    ApiResponseError,
    InvalidInputError,
    StorageError,
    translate_storage_errors,
)


class TestHierarchy:
    def test_invalid_input_is_value_error(self) -> None:
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(InvalidInputError, AddressNewsError)

    def test_not_found_is_lookup_error(self) -> None:
        assert issubclass(AddressNotFoundError, LookupError)

    def test_reference_error_message(self) -> None:
        address_id = uuid.uuid4()
        error = AddressReferenceError(address_id)
        assert isinstance(error, StorageError)
        assert str(error) == f"Address {address_id} does not exist"

    def test_api_response_error(self) -> None:
        error = ApiResponseError(400, "Address is required")
        assert error.status_code == 400
        assert str(error) == "HTTP 400: Address is required"


class TestTranslateStorageErrors:
    async def test_passes_through_results(self) -> None:
        @translate_storage_errors
        async def ok(value: int) -> int:
            return value * 2

        assert await ok(21) == 42

    async def test_wraps_sqlalchemy_errors(self) -> None:
        @translate_storage_errors
        async def broken() -> None:
            raise OperationalError("SELECT 1", {}, Exception("connection lost"))

        with patch("address_news.core.errors.logger") as mock_logger:
            with pytest.raises(StorageError, match="connection lost") as exc_info:
                await broken()

        assert isinstance(exc_info.value.__cause__, OperationalError)
        mock_logger.error.assert_called_once()

    async def test_leaves_domain_errors_alone(self) -> None:
        @translate_storage_errors
        async def invalid() -> None:
            raise InvalidInputError("bad")

        with pytest.raises(InvalidInputError):
            await invalid()

    def test_preserves_name(self) -> None:
        @translate_storage_errors
        async def named() -> None:
            return None

        assert named.__name__ == "named"
