"""Database migration CLI commands driving Alembic programmatically.

The Alembic config is resolved from the project root rather than the current
directory, and the connection URL comes from application settings.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from loguru import logger

if TYPE_CHECKING:
    from alembic.config import Config

db_app = typer.Typer()

# src/address_news/cli/db_cmd.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parents[3]
ALEMBIC_INI = PROJECT_ROOT / "alembic.ini"
SCRIPT_LOCATION = PROJECT_ROOT / "alembic"


def build_alembic_config(database_url: str | None = None) -> "Config":
    """Build an Alembic Config bound to this project's migrations.

    Args:
        database_url: Connection string override; defaults to the configured
            ``sqlalchemy_url``.

    Returns:
        alembic.config.Config with ``script_location`` and ``sqlalchemy.url`` set.

    Raises:
        typer.Exit: If the migration scripts cannot be found.
    """
    from alembic.config import Config

    from address_news.core.config import get_settings

    if not SCRIPT_LOCATION.is_dir():
        logger.error(f"Alembic scripts not found at {SCRIPT_LOCATION}")
        raise typer.Exit(code=1)

    config = Config(str(ALEMBIC_INI)) if ALEMBIC_INI.is_file() else Config()
    config.set_main_option("script_location", str(SCRIPT_LOCATION))
    url = database_url or get_settings().sqlalchemy_url
    # ConfigParser interpolation treats '%' as a directive
    config.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return config


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
) -> None:
    """Apply migrations up to the target revision."""
    from alembic import command

    config = build_alembic_config()
    logger.info(f"Upgrading address news schema to {revision}")
    command.upgrade(config, revision)
    logger.info("Schema upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
) -> None:
    """Roll the schema back to the target revision."""
    from alembic import command

    config = build_alembic_config()
    logger.info(f"Downgrading address news schema to {revision}")
    command.downgrade(config, revision)
    logger.info("Schema downgrade complete")


@db_app.command()
def current() -> None:
    """Show the schema revision the database is at."""
    from alembic import command

    command.current(build_alembic_config(), verbose=True)
