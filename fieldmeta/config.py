"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "Field Metadata API"
    database_url: str = "sqlite+pysqlite:///./fieldmeta.db"
    field_visibility_types: tuple[str, ...] = (
        "normal",
        "details-only",
        "sensitive",
        "hidden",
        "retired",
    )
    semantic_type_hierarchy_path: str | None = None
    cors_allow_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
