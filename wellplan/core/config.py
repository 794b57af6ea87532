"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Wellplan API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "wellplan"
    database_password: str = ""  # set in .env
    database_name: str = "wellplan"
    database_ssl_mode: str = "prefer"

    # Pool
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Revision cadence (rolling window, days)
    revision_window_days: int = 7

    # Content generation collaborator; client is only built when a key is set
    openai_api_key: str | None = None
    content_model: str = "gpt-4o-mini"
    content_timeout_seconds: float = 30.0

    @property
    def async_database_url(self) -> str:
        """asyncpg URL shared by the app and Alembic."""
        ssl = "require" if self.database_ssl_mode in ("require", "verify-ca", "verify-full") else "prefer"
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"postgresql+asyncpg://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?ssl={ssl}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
