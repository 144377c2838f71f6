"""
Custom exception hierarchy for geo-protocol.

All custom exceptions inherit from GeoProtocolError for easy catching.
"""


class GeoProtocolError(Exception):
    """Base exception for all geo-protocol errors."""
    pass


class ConfigurationError(GeoProtocolError):
    """Configuration-related errors.

    Raised when a configuration file cannot be parsed.

    Example:
        >>> raise ConfigurationError("Config root must be a mapping, got list")
    """
    pass


class InvalidArgumentError(GeoProtocolError):
    """Invalid argument passed to a geodesy operation.

    Attributes:
        argument: Name of the offending argument
        value: The rejected value
    """

    def __init__(self, message: str, argument: str = None, value: float = None):
        super().__init__(message)
        self.argument = argument
        self.value = value

    def __str__(self):
        base = super().__str__()
        if self.argument:
            return f"{base} ({self.argument}={self.value!r})"
        return base


class MalformedDataError(GeoProtocolError):
    """Encoded location payload could not be decoded.

    Attributes:
        field_index: Index of the field that failed, if known
        details: Dictionary with decoding error details
    """

    def __init__(self, message: str, field_index: int = None, details: dict = None):
        super().__init__(message)
        self.field_index = field_index
        self.details = details or {}

    def __str__(self):
        base = super().__str__()
        if self.field_index is not None:
            return f"{base} (field_index={self.field_index})"
        return base
