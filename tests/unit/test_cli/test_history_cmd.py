"""Tests for the history and addresses CLI commands."""

import uuid
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

from typer.testing import CliRunner

from address_news.cli.app import app
from address_news.core.config import Settings
from address_news.schemas.address import AddressStats
from address_news.schemas.search_history import SearchHistoryWithAddress

runner = CliRunner()


def _patch_db():
    """Patches for the CLI's lazy database imports."""
    mock_session = AsyncMock()
    mock_factory = MagicMock()
    mock_factory.return_value = MagicMock(
        __aenter__=AsyncMock(return_value=mock_session),
        __aexit__=AsyncMock(return_value=False),
    )
    settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")
    return (
        patch("address_news.core.config.get_settings", return_value=settings),
        patch("address_news.core.database.init_engine"),
        patch("address_news.core.database.dispose_engine", new_callable=AsyncMock),
        patch("address_news.core.database.get_session_factory", return_value=mock_factory),
    )


class TestHistoryPurge:
    """Tests for `address-news history purge`."""

    def test_uses_retention_setting_by_default(self) -> None:
        p1, p2, p3, p4 = _patch_db()
        with (
            p1,
            p2,
            p3 as mock_dispose,
            p4,
            patch(
                "address_news.services.search_history_service.purge_older_than",
                new_callable=AsyncMock,
                return_value=4,
            ) as mock_purge,
        ):
            result = runner.invoke(app, ["history", "purge"])

        assert result.exit_code == 0, result.output
        assert "Removed 4 search history rows older than 90 days" in result.output
        assert mock_purge.await_args.args[1] == 90
        mock_dispose.assert_awaited_once()

    def test_days_option(self) -> None:
        p1, p2, p3, p4 = _patch_db()
        with (
            p1,
            p2,
            p3,
            p4,
            patch(
                "address_news.services.search_history_service.purge_older_than",
                new_callable=AsyncMock,
                return_value=0,
            ) as mock_purge,
        ):
            result = runner.invoke(app, ["history", "purge", "--days", "30"])

        assert result.exit_code == 0, result.output
        assert mock_purge.await_args.args[1] == 30

    def test_negative_days_rejected(self) -> None:
        result = runner.invoke(app, ["history", "purge", "--days", "-1"])
        assert result.exit_code != 0


class TestHistoryRecent:
    """Tests for `address-news history recent`."""

    def test_lists_entries(self) -> None:
        entry = SearchHistoryWithAddress(
            id=uuid.uuid4(),
            user_id=1,
            address_id=uuid.uuid4(),
            search_query="Springfield, IL",
            results_count=3,
            search_duration_ms=1004,
            created_at=datetime(2026, 3, 1, 12, 30, tzinfo=UTC),
            address_text="Springfield, IL",
            city="Springfield",
            state="IL",
        )
        p1, p2, p3, p4 = _patch_db()
        with (
            p1,
            p2,
            p3,
            p4,
            patch(
                "address_news.services.search_history_service.get_recent_searches",
                new_callable=AsyncMock,
                return_value=[entry],
            ) as mock_recent,
        ):
            result = runner.invoke(app, ["history", "recent", "--user-id", "1"])

        assert result.exit_code == 0, result.output
        assert "2026-03-01 12:30  Springfield, IL  (3 results, 1004ms)" in result.output
        assert mock_recent.await_args.args[1:] == (1, 7)

    def test_no_entries(self) -> None:
        p1, p2, p3, p4 = _patch_db()
        with (
            p1,
            p2,
            p3,
            p4,
            patch(
                "address_news.services.search_history_service.get_recent_searches",
                new_callable=AsyncMock,
                return_value=[],
            ),
        ):
            result = runner.invoke(app, ["history", "recent", "--user-id", "1", "--days", "2"])

        assert result.exit_code == 0, result.output
        assert "No searches in the last 2 days" in result.output


class TestAddressesList:
    """Tests for `address-news addresses list`."""

    def test_lists_addresses_and_stats(self) -> None:
        address = MagicMock()
        address.id = uuid.uuid4()
        address.address_text = "Austin, TX"
        address.search_count = 2
        stats = AddressStats(total_addresses=1, total_queries=2, unique_cities=1, unique_states=1)

        p1, p2, p3, p4 = _patch_db()
        with (
            p1,
            p2,
            p3,
            p4,
            patch(
                "address_news.services.address_service.list_by_user",
                new_callable=AsyncMock,
                return_value=[address],
            ),
            patch(
                "address_news.services.address_service.get_search_stats",
                new_callable=AsyncMock,
                return_value=stats,
            ),
        ):
            result = runner.invoke(app, ["addresses", "list", "--user-id", "1"])

        assert result.exit_code == 0, result.output
        assert f"{address.id}  Austin, TX  (searched 2x)" in result.output
        assert "1 addresses, 2 searches, 1 cities, 1 states" in result.output
