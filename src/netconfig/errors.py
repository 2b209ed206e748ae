"""Exception types shared by the argument engine and the service client."""


class NetconfigError(Exception):
    """Base class for all netconfig failures reported to the user."""
    pass


class InvalidArgument(NetconfigError, ValueError):
    """Raised when a command line argument is missing or malformed.

    Covers both syntax errors and out-of-range values; the message names the
    offending token and the expected form.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ServiceError(NetconfigError):
    """Raised when the network management service rejects a request."""

    def __init__(self, message: str, name: str = ""):
        self.message = message
        self.name = name
        super().__init__(f"{message} ({name})" if name else message)


class ConfigError(NetconfigError):
    """Raised when the settings file or environment holds invalid values."""
    pass
