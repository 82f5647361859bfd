"""
Configuration helpers for the choreboard backend.

Routers, repositories and the engine read their settings from here instead of
fetching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    app_name: str
    database_url: str
    cors_origins: tuple[str, ...]
    log_level: str
    auto_create_schema: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        app_name=(os.getenv("APP_NAME") or "choreboardApp").strip(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./choreboard.db"),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        auto_create_schema=_bool(os.getenv("AUTO_CREATE_SCHEMA"), True),
    )
