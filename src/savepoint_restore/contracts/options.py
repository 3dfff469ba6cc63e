"""Configuration option contract for savepoint restore settings.

Option keys, their value types, and their declared defaults are the
contract shared between whoever writes restore settings into a
configuration store and whoever reads them back. Values are converted
with Pydantic's lax validation, so a store may hold either typed values
or their string forms ("true", "claim", ...).
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from savepoint_restore.contracts.enums import RecoveryClaimMode
from savepoint_restore.contracts.errors import IllegalConfigurationError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(value_type: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(value_type)


class ConfigOption(BaseModel, Generic[T]):
    """A typed configuration key with a declared default.

    Example:
        PARALLELISM = ConfigOption[int](
            key="parallelism.default",
            value_type=int,
            default=1,
        )
    """

    model_config = {"frozen": True}

    key: str = Field(min_length=1, description="Primary key written on set")
    value_type: type[Any] = Field(description="Type values are converted to")
    default: T | None = Field(
        default=None,
        description="Value returned when no key is present (None = no default)",
    )
    fallback_keys: tuple[str, ...] = Field(
        default=(),
        description="Deprecated keys still honoured on read, in priority order",
    )
    description: str = ""

    @property
    def keys(self) -> tuple[str, ...]:
        """Primary key followed by fallback keys."""
        return (self.key, *self.fallback_keys)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def parse(self, raw: Any) -> T:
        """Convert a raw stored value to the option's type.

        Raises:
            IllegalConfigurationError: If the value cannot be converted
        """
        if isinstance(raw, str) and issubclass(self.value_type, Enum):
            raw = raw.strip().lower().replace("-", "_")
        try:
            value: T = _adapter(self.value_type).validate_python(raw)
        except ValidationError as e:
            raise IllegalConfigurationError(
                self.key,
                f"expected {self.value_type.__name__}, got {raw!r}",
            ) from e
        return value

    def render(self, value: T) -> str:
        """String form of a value, as written into flat mappings."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)


class StateRecoveryOptions:
    """Option keys under which savepoint restore settings travel."""

    SAVEPOINT_PATH = ConfigOption[str](
        key="execution.state-recovery.path",
        value_type=str,
        fallback_keys=("execution.savepoint.path",),
        description=(
            "Path to a savepoint to restore the job from "
            "(for example hdfs:///flink/savepoint-1537)."
        ),
    )

    SAVEPOINT_IGNORE_UNCLAIMED_STATE = ConfigOption[bool](
        key="execution.state-recovery.ignore-unclaimed-state",
        value_type=bool,
        default=False,
        fallback_keys=("execution.savepoint.ignore-unclaimed-state",),
        description=(
            "Allow to skip savepoint state that cannot be restored. Allow this "
            "if you removed an operator from your pipeline after the savepoint "
            "was triggered."
        ),
    )

    RESTORE_MODE = ConfigOption[RecoveryClaimMode](
        key="execution.state-recovery.claim-mode",
        value_type=RecoveryClaimMode,
        default=RecoveryClaimMode.default(),
        fallback_keys=("execution.savepoint-restore-mode",),
        description=(
            "Describes the mode how the job should restore from the given "
            "savepoint or retained checkpoint."
        ),
    )

    @classmethod
    def all(cls) -> tuple[ConfigOption[Any], ...]:
        return (cls.SAVEPOINT_PATH, cls.SAVEPOINT_IGNORE_UNCLAIMED_STATE, cls.RESTORE_MODE)
