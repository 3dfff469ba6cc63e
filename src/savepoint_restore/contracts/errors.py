"""Error types raised across the restore-settings boundary."""


class InvalidArgumentError(ValueError):
    """Raised when restore settings are requested with unusable arguments.

    The only error the settings factories raise. Callers decide how to
    surface it (e.g. as a command-line usage error).
    """

    pass


class IllegalConfigurationError(ValueError):
    """Raised by a configuration store when a value has the wrong type.

    Belongs to the store's typed read/write, not to the settings
    conversion, which lets it propagate untouched.
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"Invalid value for option '{key}': {message}")
        self.key = key
