"""
Server configuration using pydantic-settings.

Environment variables (prefix: CLUEDO_):
    CLUEDO_HOST      - Bind address (default: 0.0.0.0)
    CLUEDO_PORT      - Bind port (default: 8000)
    CLUEDO_LOG_LEVEL - Root log level (default: INFO)
    CLUEDO_SEED      - Optional RNG seed for reproducible deals
    CLUEDO_RELOAD    - Run uvicorn with auto-reload (default: false)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Configuration for the Cluedo HTTP server."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="CLUEDO_",
    )

    host: str = Field(default="0.0.0.0", description="Address to bind.")
    port: int = Field(default=8000, ge=1, le=65535, description="Port to bind.")
    log_level: str = Field(default="INFO", description="Root logging level.")
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the dealer's RNG. Unset means a fresh random game each process.",
    )
    reload: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to upper case and reject names logging does not know."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_server_settings() -> ServerSettings:
    """Return cached server settings instance."""
    return ServerSettings()
