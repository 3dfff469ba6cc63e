"""Shared contracts for cross-boundary data types.

Enums, errors, option declarations and the restore-settings value type
live here so that stores, converters and callers agree on one definition.

Import pattern:
    from savepoint_restore.contracts import RecoveryClaimMode, SavepointRestoreSettings
"""

# isort: skip_file
# Import order is load-bearing: restore depends on options, which depends
# on enums and errors.

from savepoint_restore.contracts.enums import RecoveryClaimMode
from savepoint_restore.contracts.errors import (
    IllegalConfigurationError,
    InvalidArgumentError,
)
from savepoint_restore.contracts.options import (
    ConfigOption,
    StateRecoveryOptions,
)
from savepoint_restore.contracts.restore import (
    NoRestore,
    RestoreFromSavepoint,
    SavepointRestoreSettings,
    for_path,
    none,
)

__all__ = [
    # enums
    "RecoveryClaimMode",
    # errors
    "IllegalConfigurationError",
    "InvalidArgumentError",
    # options
    "ConfigOption",
    "StateRecoveryOptions",
    # restore
    "NoRestore",
    "RestoreFromSavepoint",
    "SavepointRestoreSettings",
    "for_path",
    "none",
]
