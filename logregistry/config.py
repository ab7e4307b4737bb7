"""logregistry.config
=====================
Mini-README: Centralises configuration using Pydantic settings. Values come from
``LOGREGISTRY_``-prefixed environment variables or a local ``.env`` file and seed the
default level, console toggle and console threshold of a ``LogRegistry``.
Usage: import `get_settings()` to retrieve a cached configuration instance.
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .levels import Level, parse_level


class Settings(BaseSettings):
    """Logging defaults leveraging environment variables."""

    level: int = Field(default=Level.ALL)
    use_console_handler: bool = Field(default=True)
    console_level: int = Field(default=Level.ALL)

    @field_validator("level", "console_level", mode="before")
    @classmethod
    def _parse_level_name(cls, value: Any) -> Any:
        # Accept "warning", "FINE", "30" and friends; None falls back to ALL.
        parsed = parse_level(value)
        return Level.ALL if parsed is None else parsed

    class Config:
        env_prefix = "LOGREGISTRY_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of logging settings."""

    return Settings()
