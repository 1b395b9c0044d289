"""Address search CLI command: the submission form and results view."""

import asyncio

import typer

from address_news.client import AddressNewsClient, ConnectionStatus, SearchView
from address_news.core.errors import ApiResponseError, InvalidInputError


def search(
    address: str = typer.Argument(..., help="Address, e.g. 'Springfield, IL, USA, 62701'"),
    user_id: int | None = typer.Option(None, "--user-id", help="Caller id (server default when omitted)"),
    api_url: str | None = typer.Option(None, "--api-url", help="API base URL (defaults to API_BASE_URL)"),
) -> None:
    """Find local news for an address via the API, or locally when it is unreachable."""
    asyncio.run(_search(address, user_id, api_url))


async def _search(address: str, user_id: int | None, api_url: str | None) -> None:
    """Async implementation of the search command."""
    from address_news.core.config import get_settings

    settings = get_settings()
    async with AddressNewsClient(
        api_url or settings.api_base_url,
        timeout=settings.client_timeout,
        user_id=user_id,
    ) as client:
        status = await client.check_connection()
        typer.echo(f"Server: {status.value}")
        try:
            view = await client.search(address)
        except (InvalidInputError, ApiResponseError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e
        if status == ConnectionStatus.CONNECTED and view.is_local:
            typer.echo("Server became unreachable; showing local results")
        render_results(view)


def render_results(view: SearchView) -> None:
    """Print a search result as a list of articles."""
    news = view.news
    typer.echo(f"\nNews for {news.location} ({len(news.articles)} articles)")
    if view.is_local:
        typer.echo("(offline results)")
    for article in news.articles:
        typer.echo(f"\n  {article.title}")
        typer.echo(f"    {article.description}")
        typer.echo(f"    {article.source} | {article.published_at:%Y-%m-%d} | {article.url}")
    if view.search_stats:
        stats = view.search_stats
        typer.echo(
            f"\nSearched {stats.get('searchCount')} time(s); "
            f"{stats.get('resultsCount')} results in {stats.get('duration')}ms"
        )
