"""Search history maintenance CLI commands."""

import asyncio

import typer

history_app = typer.Typer()


@history_app.command("purge")
def purge(
    days: int | None = typer.Option(None, "--days", help="Delete history older than this many days", min=0),
) -> None:
    """Delete search history older than the retention window."""
    asyncio.run(_purge(days))


@history_app.command("recent")
def recent(
    user_id: int = typer.Option(..., "--user-id", help="User whose searches to list"),
    days: int | None = typer.Option(None, "--days", help="Look-back window in days", min=1),
) -> None:
    """List a user's recent searches, newest first."""
    asyncio.run(_recent(user_id, days))


async def _purge(days: int | None) -> None:
    """Async implementation of the retention purge."""
    from address_news.core.config import get_settings
    from address_news.core.database import dispose_engine, get_session_factory, init_engine
    from address_news.services.search_history_service import purge_older_than

    settings = get_settings()
    init_engine(settings.sqlalchemy_url)
    retention = days if days is not None else settings.history_retention_days

    try:
        factory = get_session_factory()
        async with factory() as session:
            removed = await purge_older_than(session, retention)
            typer.echo(f"Removed {removed} search history rows older than {retention} days")
    finally:
        await dispose_engine()


async def _recent(user_id: int, days: int | None) -> None:
    """Async implementation of the recent-search listing."""
    from address_news.core.config import get_settings
    from address_news.core.database import dispose_engine, get_session_factory, init_engine
    from address_news.services.search_history_service import get_recent_searches

    settings = get_settings()
    init_engine(settings.sqlalchemy_url)
    window = days if days is not None else settings.recent_search_days

    try:
        factory = get_session_factory()
        async with factory() as session:
            entries = await get_recent_searches(session, user_id, window)
            if not entries:
                typer.echo(f"No searches in the last {window} days")
                return
            for entry in entries:
                typer.echo(
                    f"{entry.created_at:%Y-%m-%d %H:%M}  {entry.search_query}  "
                    f"({entry.results_count} results, {entry.search_duration_ms}ms)"
                )
    finally:
        await dispose_engine()
