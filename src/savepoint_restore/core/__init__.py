# src/savepoint_restore/core/__init__.py
"""Core infrastructure: Configuration store, Conversion, Settings, Logging."""

from savepoint_restore.core.config import (
    LoggingSettings,
    PackageSettings,
    load_settings,
)
from savepoint_restore.core.configuration import (
    Configuration,
    ReadableConfig,
    WritableConfig,
)
from savepoint_restore.core.conversion import (
    from_configuration,
    from_mapping,
    to_configuration,
    to_mapping,
)
from savepoint_restore.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    "Configuration",
    "LoggingSettings",
    "PackageSettings",
    "ReadableConfig",
    "WritableConfig",
    "configure_logging",
    "from_configuration",
    "from_mapping",
    "get_logger",
    "load_settings",
    "to_configuration",
    "to_mapping",
]
