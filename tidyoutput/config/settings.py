"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="tidy-output", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Cleanup (see config/cleanup/static for profile semantics)
    cleanup_profile: str = Field(
        default="active",
        description="Cleanup profile name from static.json, or 'active' for the profile marked active",
    )
    max_content_length: int = Field(
        default=2_000_000,
        ge=1,
        description="Largest content (characters) accepted by the HTTP surface; parsing is unbounded otherwise",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
