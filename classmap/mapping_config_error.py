"""Error raised for malformed mapping table configuration."""


class MappingConfigError(ValueError):
    """Raised when a prefix mapping cannot be registered or compiled."""

    def __init__(self, message: str, prefix: str | None = None) -> None:
        """Initialize the error, optionally naming the offending prefix."""
        self.prefix = prefix
        if prefix is not None:
            message = f"{message} (prefix: {prefix!r})"
        super().__init__(message)
