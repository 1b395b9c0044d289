"""Typer CLI root application with serve command."""

import typer

from address_news.core.config import get_settings
from address_news.core.logging import setup_logging

app = typer.Typer(name="address-news", help="Address news finder CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "address_news.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from address_news.cli.address_cmd import address_app
    from address_news.cli.db_cmd import db_app
    from address_news.cli.history_cmd import history_app
    from address_news.cli.search_cmd import search

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(address_app, name="addresses", help="Stored address commands")
    app.add_typer(history_app, name="history", help="Search history commands")
    app.command("search")(search)


_register_subcommands()
