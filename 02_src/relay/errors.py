"""Error taxonomy for the relay."""


class RelayError(Exception):
    """Base class for all relay errors."""


class ConfigError(RelayError):
    """A required configuration value is missing or invalid."""


class TransportError(RelayError):
    """Inbound webhook payload is malformed or unsigned."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class OracleError(RelayError):
    """Dialog service unreachable or returned a malformed response."""


class DataLookupError(RelayError):
    """Product lookup failed or returned no records."""


class SendError(RelayError):
    """Outbound delivery to the Send API failed."""
