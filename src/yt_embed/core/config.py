"""Application configuration utilities.

This module defines application settings loaded from environment variables.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application settings loaded from the environment.

    Notes
    -----
    - Environment variables are read with the ``YTE_`` prefix (e.g., ``YTE_EMBED_BASE_URL``).
    - ``default_origin`` is used when a request does not carry its own origin.
    """

    model_config = SettingsConfigDict(env_prefix="YTE_", env_file=".env", extra="ignore")

    app_name: str = Field(default="YouTube Embed Parameters", description="Application display name")
    debug: bool = Field(default=False, description="Enable debug mode")
    embed_base_url: str = Field(
        default="https://www.youtube.com/embed",
        description="Base URL for generated embed URLs",
    )
    default_origin: Optional[str] = Field(
        default=None,
        description="Origin sent to the player when a request provides none",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache application settings.

    Notes
    -----
    - Cached with ``functools.lru_cache(maxsize=1)`` to provide a single settings instance
      across the process. Tests call ``get_settings.cache_clear()`` after changing the env.

    Returns
    -------
    Settings
        The application settings instance.
    """

    return Settings()
