"""Conversion between restore settings and configuration stores.

Presence of the savepoint path key is the sole discriminator between
"restore" and "no restore": a store without a path reads back as
none() whatever the flag and claim-mode keys hold, and writing none()
never writes a path key.
"""

from collections.abc import Mapping
from typing import Any

from savepoint_restore.contracts.options import StateRecoveryOptions
from savepoint_restore.contracts.restore import (
    SavepointRestoreSettings,
    for_path,
    none,
)
from savepoint_restore.core.configuration import (
    Configuration,
    ReadableConfig,
    WritableConfig,
)
from savepoint_restore.core.logging import get_logger

logger = get_logger(__name__)


def to_configuration(
    settings: SavepointRestoreSettings,
    configuration: WritableConfig,
) -> None:
    """Write settings into configuration in place.

    The flag and claim mode are always written. The path is written only
    when a restore is requested; keys not owned by the restore settings
    are left untouched.
    """
    configuration.set(
        StateRecoveryOptions.SAVEPOINT_IGNORE_UNCLAIMED_STATE,
        settings.allow_non_restored_state,
    )
    configuration.set(StateRecoveryOptions.RESTORE_MODE, settings.recovery_claim_mode)
    if settings.restore_path is not None:
        configuration.set(StateRecoveryOptions.SAVEPOINT_PATH, settings.restore_path)

    logger.debug(
        "restore_settings_written",
        restore_requested=settings.restore_requested,
        restore_path=settings.restore_path,
        allow_non_restored_state=settings.allow_non_restored_state,
        recovery_claim_mode=settings.recovery_claim_mode.name,
    )


def from_configuration(configuration: ReadableConfig) -> SavepointRestoreSettings:
    """Read settings from configuration.

    Returns none() if the path is unset (or empty) without consulting the
    flag and claim-mode keys. Otherwise those keys are read, falling back
    to their declared defaults.

    Raises:
        IllegalConfigurationError: Propagated from the store's typed read
    """
    path = configuration.get_optional(StateRecoveryOptions.SAVEPOINT_PATH)
    if not path:
        logger.debug("restore_settings_read", restore_requested=False)
        return none()

    allow_non_restored_state = configuration.get(
        StateRecoveryOptions.SAVEPOINT_IGNORE_UNCLAIMED_STATE
    )
    recovery_claim_mode = configuration.get(StateRecoveryOptions.RESTORE_MODE)
    settings = for_path(path, allow_non_restored_state, recovery_claim_mode)

    logger.debug(
        "restore_settings_read",
        restore_requested=True,
        restore_path=settings.restore_path,
        allow_non_restored_state=settings.allow_non_restored_state,
        recovery_claim_mode=settings.recovery_claim_mode.name,
    )
    return settings


def to_mapping(settings: SavepointRestoreSettings) -> dict[str, str]:
    """Render settings as a flat string mapping, e.g. for a job description."""
    configuration = Configuration()
    to_configuration(settings, configuration)
    return configuration.to_dict()


def from_mapping(mapping: Mapping[str, Any]) -> SavepointRestoreSettings:
    """Read settings from a flat key/value mapping."""
    return from_configuration(Configuration(mapping))
