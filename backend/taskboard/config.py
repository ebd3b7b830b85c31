"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - workspace_timezone is always a loadable IANA name ("UTC" when unset or invalid)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Timezone normalized here once; recurrence code still receives it as an explicit
      argument and never reads settings itself
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from zoneinfo import ZoneInfo

from taskboard.core.recurrence import DEFAULT_TIMEZONE, resolve_timezone


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://taskboard:taskboard@db:5432/taskboard"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Scheduling
    workspace_timezone: str = DEFAULT_TIMEZONE

    @field_validator("workspace_timezone", mode="before")
    @classmethod
    def normalize_timezone(cls, v: str | None) -> str:
        """Unknown or blank zone names fall back to UTC instead of failing startup."""
        cleaned = (v or "").strip() if isinstance(v, str) else ""
        if not isinstance(resolve_timezone(cleaned), ZoneInfo):
            return DEFAULT_TIMEZONE
        return cleaned

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
