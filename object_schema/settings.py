"""Environment-based settings for object-schema.

Settings are read from environment variables with the ``OBJECT_SCHEMA_``
prefix (or a local ``.env`` file):

    OBJECT_SCHEMA_LOG_LEVEL=DEBUG
    OBJECT_SCHEMA_LOG_FORMAT=json
    OBJECT_SCHEMA_LOG_FILE=./logs/object_schema.log
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["human", "json", "simple"]


class SchemaSettings(BaseSettings):
    """Runtime settings, currently limited to logging behaviour.

    Example:
        >>> settings = SchemaSettings(log_level="debug")
        >>> settings.log_level
        'DEBUG'
    """

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="human", description="Log format: 'human', 'json' or 'simple'")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_prefix="OBJECT_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level is a known value."""
        level = v.upper()
        if level == "WARN":
            level = "WARNING"
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {VALID_LOG_LEVELS}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate format is a known value."""
        if v.lower() not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of: {VALID_LOG_FORMATS}")
        return v.lower()


def get_settings() -> SchemaSettings:
    """Build settings from the current environment."""
    return SchemaSettings()
