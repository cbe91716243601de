"""
Configuration settings for the todo service.

Uses Pydantic Settings to load environment variables (or a `.env` file) for the
HTTP listener, server timeouts, seeding, and logging. Defaults reproduce the
behaviour of a plain `todo-service serve` with no environment set.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # HTTP listener
    host: str = Field("0.0.0.0", alias="TODO_HOST")
    port: int = Field(3000, alias="TODO_PORT")

    # Timeouts (seconds)
    read_timeout_seconds: float = Field(5.0, alias="TODO_READ_TIMEOUT")
    idle_timeout_seconds: int = Field(60, alias="TODO_IDLE_TIMEOUT")

    # Store
    seed_on_startup: bool = Field(True, alias="TODO_SEED")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def base_url(self) -> str:
        """URL a local client should use to reach the listener."""
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
