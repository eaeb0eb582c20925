"""Codec configuration via pydantic-settings.

Values are read from environment variables prefixed with ``CODICE_FISCALE_``
(or a ``.env`` file). Defaults reproduce the plain codec behaviour.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CodiceFiscaleSettings(BaseSettings):
    """Runtime knobs for logging and date interpretation.

    Usage:
        from codicefiscale.config import settings
        settings.log_level
        settings.default_min_age
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CODICE_FISCALE_", extra="ignore")

    log_level: str = Field(default="INFO")
    date_dayfirst: bool = Field(
        default=False,
        description="Read ambiguous calendar strings like 01/10/1980 as day/month/year",
    )
    default_min_age: int | None = Field(
        default=None,
        description="Minimum age used when reconstructing a probable date of birth",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @field_validator("default_min_age")
    @classmethod
    def validate_min_age(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            msg = f"default_min_age must be >= 0, got {v}"
            raise ValueError(msg)
        return v


# Module-level singleton — import this wherever settings are needed.
settings = CodiceFiscaleSettings()
