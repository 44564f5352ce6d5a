"""Configuration loaded from AGWIRE_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AgwireSettings(BaseSettings):
    """agwire settings.

    All fields are read from environment variables with the ``AGWIRE_``
    prefix.  For example, ``AGWIRE_LOG_LEVEL=DEBUG`` maps to ``log_level``.
    """

    model_config = SettingsConfigDict(
        env_prefix="AGWIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    log_json: bool = False
    """Write log records to stderr as JSON lines."""

    # -- Output ----------------------------------------------------------------
    json_indent: int | None = Field(default=2, ge=0)
    """Indentation of JSON printed by the CLI; ``None`` prints compact JSON."""


@lru_cache(maxsize=1)
def get_settings() -> AgwireSettings:
    """Return a cached settings instance.

    Call ``get_settings.cache_clear()`` in tests to force a re-read after
    overriding env vars.
    """
    return AgwireSettings()
