"""Modes and kinds used across the restore-settings boundary."""

from enum import Enum


class RecoveryClaimMode(str, Enum):
    """How a restoring job treats the snapshot it is restored from.

    Uses (str, Enum) because this IS written into configuration stores
    (execution.state-recovery.claim-mode).

    Values:
        CLAIM: The job takes ownership of the snapshot and may delete it
        NO_CLAIM: The job never touches the snapshot's files
        LEGACY: Deprecated; ownership is never taken, but shared files may
            still be referenced by later checkpoints
    """

    NO_CLAIM = "no_claim"
    CLAIM = "claim"
    LEGACY = "legacy"

    @classmethod
    def default(cls) -> "RecoveryClaimMode":
        return cls.NO_CLAIM

    @classmethod
    def parse(cls, value: "RecoveryClaimMode | str") -> "RecoveryClaimMode":
        """Resolve a member from itself, its name, or its value.

        Matching is case-insensitive and treats '-' as '_', so "NO_CLAIM",
        "no-claim" and "no_claim" all resolve to NO_CLAIM.

        Raises:
            ValueError: If the value names no member
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Cannot interpret {value!r} as a recovery claim mode")
        normalized = value.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(m.name for m in cls)
            raise ValueError(
                f"Unknown recovery claim mode '{value}'. Expected one of: {allowed}"
            ) from None

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    RecoveryClaimMode.CLAIM: (
        "The job claims ownership of the snapshot and may delete it once it "
        "is subsumed by newer checkpoints."
    ),
    RecoveryClaimMode.NO_CLAIM: (
        "The job never deletes the snapshot; its first checkpoint is a full "
        "one so later checkpoints do not depend on the snapshot's files."
    ),
    RecoveryClaimMode.LEGACY: (
        "Deprecated. The job never claims the snapshot, but its first "
        "checkpoint may still reference the snapshot's files."
    ),
}
