"""
Package settings.

Manifesto:
    The pipeline itself has no tunables, but its logging does.  One
    validated, cached settings object resolves those values from the
    environment (``ATTRIBUTER_*``) or a ``.env`` file.

Tags:
    attributer, configuration, settings, pydantic

Doc-Types:
    api-reference
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AttributerSettings(BaseSettings):
    """Attributer configuration.

    Fields
    ──────
    log_level     : Structlog log level
    log_format    : ``json``, ``console`` or ``auto`` (JSON unless stdout is a tty)
    service_name  : Value of the ``service.name`` log field
    """

    model_config = SettingsConfigDict(
        env_prefix="ATTRIBUTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_format: Literal["json", "console", "auto"] = Field(default="auto")
    service_name: str = Field(default="attributer")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> AttributerSettings:
    """Load, validate, and cache the settings."""
    return AttributerSettings()


__all__ = ["AttributerSettings", "get_settings"]
