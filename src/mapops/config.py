"""
Settings for the mapops package.

Only ambient concerns are configurable; operation semantics are not.

Environment variables:
- MAPOPS_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: WARNING)
- MAPOPS_LOG_FORMAT: logging format string
"""

import os
from typing import Final, Literal

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# DEFAULTS
# =============================================================================

LOGGER_NAME: Final[str] = "mapops"

ENV_PREFIX: Final[str] = "MAPOPS_"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class Settings(BaseModel):
    """
    Package settings.

    Immutable (frozen=True): build a new instance instead of patching one.
    """

    log_level: LogLevel = Field(default=DEFAULT_LOG_LEVEL, description="Level of the mapops logger")
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT, min_length=1, description="Format string for the handler"
    )

    model_config = {"frozen": True}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from MAPOPS_* environment variables.

        Unset variables fall back to the field defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw
        return cls(**values)

