"""Savepoint restore settings.

A restore setting is one of two variants:

- NoRestore: the job starts without any savepoint. There is exactly one
  shared instance, returned by none().
- RestoreFromSavepoint: the job restores from restore_path, with an
  explicit non-restored-state policy and claim mode.

Both variants expose the same attributes so callers can read them
without type checks; restore_requested tells them apart. Values are
frozen and compare structurally.

Usage:
    settings = SavepointRestoreSettings.for_path("s3://bucket/sp-42", True)
    if settings.restore_requested:
        submit(job, savepoint=settings.restore_path)
"""

from dataclasses import dataclass, field

from savepoint_restore.contracts.enums import RecoveryClaimMode
from savepoint_restore.contracts.errors import InvalidArgumentError
from savepoint_restore.contracts.options import StateRecoveryOptions


class SavepointRestoreSettings:
    """Common base of the two restore-settings variants."""

    __slots__ = ()

    restore_path: str | None
    allow_non_restored_state: bool
    recovery_claim_mode: RecoveryClaimMode

    @property
    def restore_requested(self) -> bool:
        """True if the job should restore from a savepoint."""
        return self.restore_path is not None


    @staticmethod
    def none() -> "NoRestore":
        """Shared "do not restore" value; see none()."""
        return none()

    @staticmethod
    def for_path(
        path: str | None,
        allow_non_restored_state: bool | None = None,
        recovery_claim_mode: RecoveryClaimMode | str | None = None,
    ) -> "RestoreFromSavepoint":
        """Restore from the savepoint at path; see for_path()."""
        return for_path(path, allow_non_restored_state, recovery_claim_mode)


@dataclass(frozen=True, repr=False)
class NoRestore(SavepointRestoreSettings):
    """No restore should happen."""

    restore_path: None = field(default=None, init=False)
    allow_non_restored_state: bool = field(default=False, init=False)
    recovery_claim_mode: RecoveryClaimMode = field(
        default=RecoveryClaimMode.NO_CLAIM, init=False
    )

    def __repr__(self) -> str:
        return "SavepointRestoreSettings.none()"

    def __reduce__(self) -> tuple[object, tuple[()]]:
        # Unpickles to the shared instance
        return (none, ())


@dataclass(frozen=True, repr=False)
class RestoreFromSavepoint(SavepointRestoreSettings):
    """Restore from the savepoint at restore_path.

    Direct construction is validated the same way as for_path(), so no
    instance can carry a missing or empty path.

    Attributes:
        restore_path: Location of the savepoint (URI or path, never empty)
        allow_non_restored_state: Drop state of operators that are no longer
            part of the job instead of failing the restore
        recovery_claim_mode: Whether the job takes ownership of the savepoint;
            names and values given as strings are resolved to the member

    Raises:
        InvalidArgumentError: If path is missing or empty, or the flag or
            claim mode cannot be interpreted
    """

    restore_path: str
    allow_non_restored_state: bool
    recovery_claim_mode: RecoveryClaimMode

    def __post_init__(self) -> None:
        path: object = self.restore_path
        if path is None:
            raise InvalidArgumentError("Savepoint restore path must not be None")
        if not isinstance(path, str):
            raise InvalidArgumentError(
                f"Savepoint restore path must be a string, got {type(path).__name__}"
            )
        if path == "":
            raise InvalidArgumentError("Savepoint restore path must not be empty")

        if not isinstance(self.allow_non_restored_state, bool):
            raise InvalidArgumentError(
                "allow_non_restored_state must be a bool, "
                f"got {type(self.allow_non_restored_state).__name__}"
            )

        try:
            mode = RecoveryClaimMode.parse(self.recovery_claim_mode)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
        # Frozen: bypass __setattr__ to store the resolved member
        object.__setattr__(self, "recovery_claim_mode", mode)

    def __repr__(self) -> str:
        return (
            "SavepointRestoreSettings.for_path("
            f"restore_path={self.restore_path!r}, "
            f"allow_non_restored_state={self.allow_non_restored_state}, "
            f"recovery_claim_mode={self.recovery_claim_mode.name})"
        )


_NONE = NoRestore()


def none() -> NoRestore:
    """Return the shared settings value for "do not restore"."""
    return _NONE


def for_path(
    path: str | None,
    allow_non_restored_state: bool | None = None,
    recovery_claim_mode: RecoveryClaimMode | str | None = None,
) -> RestoreFromSavepoint:
    """Create settings that restore from the savepoint at path.

    Omitted arguments take the declared defaults of their options
    (StateRecoveryOptions.SAVEPOINT_IGNORE_UNCLAIMED_STATE and
    StateRecoveryOptions.RESTORE_MODE).

    Args:
        path: Savepoint location; must be a non-empty string
        allow_non_restored_state: Skip state that cannot be mapped to the job
        recovery_claim_mode: Claim mode member, or its name/value as a string

    Returns:
        RestoreFromSavepoint value

    Raises:
        InvalidArgumentError: If path is missing or empty, or the flag or
            claim mode cannot be interpreted
    """
    if allow_non_restored_state is None:
        allow_non_restored_state = (
            StateRecoveryOptions.SAVEPOINT_IGNORE_UNCLAIMED_STATE.default or False
        )
    if recovery_claim_mode is None:
        recovery_claim_mode = (
            StateRecoveryOptions.RESTORE_MODE.default or RecoveryClaimMode.default()
        )

    return RestoreFromSavepoint(
        restore_path=path,  # type: ignore[arg-type]
        allow_non_restored_state=allow_non_restored_state,
        recovery_claim_mode=recovery_claim_mode,  # type: ignore[arg-type]
    )
