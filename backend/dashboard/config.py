"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dashboard.core.domain_types import DASHBOARD_PATH, INVOICES_PATH


def to_asyncpg_url(url: str) -> str:
    """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return url.replace(prefix, "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://dashboard:dashboard@db:5432/dashboard"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        return to_asyncpg_url(v) if isinstance(v, str) else v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Navigation
    invoices_path: str = INVOICES_PATH
    login_redirect_path: str = DASHBOARD_PATH

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
