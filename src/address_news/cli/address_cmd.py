"""Stored address CLI commands."""

import asyncio

import typer

address_app = typer.Typer()


@address_app.command("list")
def list_addresses(
    user_id: int = typer.Option(..., "--user-id", help="Owner of the addresses"),
) -> None:
    """List a user's addresses, most recently searched first."""
    asyncio.run(_list_addresses(user_id))


async def _list_addresses(user_id: int) -> None:
    """Async implementation of address listing."""
    from address_news.core.config import get_settings
    from address_news.core.database import dispose_engine, get_session_factory, init_engine
    from address_news.services.address_service import get_search_stats, list_by_user

    settings = get_settings()
    init_engine(settings.sqlalchemy_url)

    try:
        factory = get_session_factory()
        async with factory() as session:
            addresses = await list_by_user(session, user_id)
            stats = await get_search_stats(session, user_id)
            for address in addresses:
                typer.echo(f"{address.id}  {address.address_text}  (searched {address.search_count}x)")
            typer.echo(
                f"\n{stats.total_addresses} addresses, {stats.total_queries} searches, "
                f"{stats.unique_cities} cities, {stats.unique_states} states"
            )
    finally:
        await dispose_engine()
