"""Savepoint restore settings and their configuration-store mapping.

Import pattern:
    from savepoint_restore import SavepointRestoreSettings, from_configuration
"""

from savepoint_restore.contracts import (
    ConfigOption,
    IllegalConfigurationError,
    InvalidArgumentError,
    NoRestore,
    RecoveryClaimMode,
    RestoreFromSavepoint,
    SavepointRestoreSettings,
    StateRecoveryOptions,
    for_path,
    none,
)
from savepoint_restore.core import (
    Configuration,
    ReadableConfig,
    WritableConfig,
    from_configuration,
    from_mapping,
    to_configuration,
    to_mapping,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigOption",
    "Configuration",
    "IllegalConfigurationError",
    "InvalidArgumentError",
    "NoRestore",
    "ReadableConfig",
    "RecoveryClaimMode",
    "RestoreFromSavepoint",
    "SavepointRestoreSettings",
    "StateRecoveryOptions",
    "WritableConfig",
    "for_path",
    "from_configuration",
    "from_mapping",
    "none",
    "to_configuration",
    "to_mapping",
]
