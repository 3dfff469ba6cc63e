# src/savepoint_restore/core/config.py
"""
Package settings.

Uses Pydantic for validation and Dynaconf for environment loading.
Settings are frozen (immutable) after construction.
"""

from typing import Literal

from pydantic import BaseModel, Field


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum level of emitted events",
    )
    json_output: bool = Field(
        default=False,
        description="Render events as JSON lines instead of console text",
    )


class PackageSettings(BaseModel):
    """Top-level package configuration."""

    model_config = {"frozen": True}

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Structured logging configuration",
    )


def load_settings() -> PackageSettings:
    """Load settings from SAVEPOINT_RESTORE_* environment variables.

    Environment variable format: SAVEPOINT_RESTORE_LOGGING__LEVEL=DEBUG
    for nested keys. Unset keys take the Pydantic defaults.

    Returns:
        Validated PackageSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
    """
    from dynaconf import Dynaconf

    dynaconf_settings = Dynaconf(
        envvar_prefix="SAVEPOINT_RESTORE",
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES", "MERGE_ENABLED"}
    raw_config = {
        k.lower(): _lower_keys(v)
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return PackageSettings(**raw_config)


def _lower_keys(value: object) -> object:
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value
