"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - table_count >= 1 and lock_timeout_seconds > 0 (validated at load)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults for every setting: the service starts with no environment at all
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from restaurant_api.core.domain_types import DEFAULT_TABLE_COUNT


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Restaurant seed
    table_count: int = Field(DEFAULT_TABLE_COUNT, ge=1)
    menu_seed_file: str | None = None  # JSON list; None = built-in menu

    # Stores
    lock_timeout_seconds: float = Field(5.0, gt=0)

    # Server
    host: str = "127.0.0.1"
    port: int = Field(8081, ge=1, le=65535)
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("menu_seed_file", mode="before")
    @classmethod
    def blank_seed_file_is_none(cls, v):
        """MENU_SEED_FILE= (empty) means the built-in menu."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
