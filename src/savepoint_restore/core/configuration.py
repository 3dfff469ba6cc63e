"""Typed key/value configuration store.

The conversion functions depend only on the ReadableConfig and
WritableConfig protocols; Configuration is the in-memory implementation
shipped with the package. Raw values are stored as given and converted
through the option on every read, so a store built from a flat string
mapping (e.g. a job description) reads the same as one built with set().
"""

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, TypeVar

from savepoint_restore.contracts.errors import IllegalConfigurationError
from savepoint_restore.contracts.options import ConfigOption, StateRecoveryOptions

T = TypeVar("T")

_MISSING = object()

# Known options, used to render values in to_dict()
_KNOWN_OPTIONS: dict[str, ConfigOption[Any]] = {
    key: option for option in StateRecoveryOptions.all() for key in option.keys
}


class ReadableConfig(Protocol):
    """Read access to a configuration store."""

    def get(self, option: ConfigOption[T]) -> T | None:
        """Value of option, or its declared default if unset."""
        ...

    def get_optional(self, option: ConfigOption[T]) -> T | None:
        """Value of option, or None if unset."""
        ...


class WritableConfig(Protocol):
    """Write access to a configuration store."""

    def set(self, option: ConfigOption[T], value: T) -> "WritableConfig":
        ...


class Configuration:
    """In-memory configuration store keyed by option key.

    Not thread-safe; callers sharing a store across threads must
    synchronize access themselves.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values) if values else {}

    def _lookup(self, option: ConfigOption[Any]) -> Any:
        for key in option.keys:
            if key in self._values:
                return self._values[key]
        return _MISSING

    def get(self, option: ConfigOption[T]) -> T | None:
        """Read option, falling back to its declared default.

        Raises:
            IllegalConfigurationError: If the stored value has the wrong type
        """
        raw = self._lookup(option)
        if raw is _MISSING:
            return option.default
        return option.parse(raw)

    def get_optional(self, option: ConfigOption[T]) -> T | None:
        """Read option without falling back to its default.

        Raises:
            IllegalConfigurationError: If the stored value has the wrong type
        """
        raw = self._lookup(option)
        if raw is _MISSING:
            return None
        return option.parse(raw)

    def contains(self, option: ConfigOption[Any]) -> bool:
        """Whether the primary key or any fallback key is present."""
        return self._lookup(option) is not _MISSING

    def set(self, option: ConfigOption[T], value: T) -> "Configuration":
        """Write value under the option's primary key.

        Fallback keys already in the store are left as they are; the
        primary key takes precedence on read.

        Raises:
            IllegalConfigurationError: If value is None or has the wrong type
        """
        if value is None:
            raise IllegalConfigurationError(option.key, "value must not be None")
        self._values[option.key] = option.parse(value)
        return self

    def remove(self, option: ConfigOption[Any]) -> bool:
        """Remove the option under all of its keys.

        Returns:
            True if any key was present
        """
        removed = False
        for key in option.keys:
            if self._values.pop(key, _MISSING) is not _MISSING:
                removed = True
        return removed

    def to_dict(self) -> dict[str, str]:
        """Flat string snapshot of the store."""
        result: dict[str, str] = {}
        for key, value in self._values.items():
            option = _KNOWN_OPTIONS.get(key)
            result[key] = option.render(value) if option is not None else str(value)
        return result

    def copy(self) -> "Configuration":
        return Configuration(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Configuration({self._values!r})"
