"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str | None = Field(
        default=None,
        description="Full async SQLAlchemy connection string; overrides the DB_* fields when set",
    )
    db_host: str = Field(default="localhost", description="PostgreSQL host")
    db_port: int = Field(default=5432, description="PostgreSQL port", gt=0, le=65535)
    db_name: str = Field(default="address_news_db", description="PostgreSQL database name")
    db_user: str = Field(default="postgres", description="PostgreSQL user")
    db_password: str = Field(default="postgres", description="PostgreSQL password")

    @property
    def sqlalchemy_url(self) -> str:
        """Resolve the async connection string.

        Returns:
            ``database_url`` when set, otherwise a ``postgresql+asyncpg`` URL
            assembled from the DB_* fields.
        """
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    # Searches
    default_user_id: int | None = Field(
        default=1,
        description="User id applied when a request carries no userId (unset to require one)",
    )
    history_limit: int = Field(
        default=50,
        description="Default number of history entries returned per user",
        gt=0,
    )
    address_history_limit: int = Field(
        default=20,
        description="Default number of history entries returned per address",
        gt=0,
    )
    recent_search_days: int = Field(
        default=7,
        description="Window in days for recent-search listings",
        gt=0,
    )
    history_retention_days: int = Field(
        default=90,
        description="Search history older than this many days is purged",
        gt=0,
    )
    news_simulated_delay: float = Field(
        default=1.0,
        description="Artificial latency in seconds for the simulated news provider",
        ge=0,
    )

    # Client
    api_base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the HTTP API used by the client and CLI",
    )
    client_timeout: float = Field(
        default=10.0,
        description="Client request timeout in seconds",
        gt=0,
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "api_base_url must be an http(s) URL"
            raise ValueError(msg)
        return v.rstrip("/")

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit stderr logs as JSON objects instead of text lines",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_prefix: str = Field(
        default="/api",
        description="API route prefix",
    )


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
