"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - database_url always names an async driver (aiosqlite or asyncpg)

Design Decisions:
    - Defaults work out-of-the-box: file-based SQLite under ./data
    - Prisma-style `file:` URLs accepted so existing DATABASE_URL values keep working
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/ice_breakun.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_database_url(cls, v: str) -> str:
        """Map sync/Prisma URLs onto the async drivers."""
        if not isinstance(v, str):
            return v
        if v.startswith("file:"):
            return "sqlite+aiosqlite:///" + v.removeprefix("file:")
        if v.startswith("sqlite:///"):
            return v.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_auto_create: bool = True
    seed_sample_users: bool = False

    # API
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:3002",
        "http://host.docker.internal:3000",
    ]
    host: str = "0.0.0.0"
    port: int = 3001

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
