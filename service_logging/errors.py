"""Exception types raised by service_logging."""


class ServiceLoggingError(Exception):
    """Base class for every error raised by this package."""


class ParseError(ServiceLoggingError, ValueError):
    """Raised when a string does not name a known severity."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid severity: {value}")


class TransportError(ServiceLoggingError):
    """Raised when a batch could not be delivered to the logging service."""


class BackendError(ServiceLoggingError):
    """Raised when the logging service answers with a non-2xx status.

    The response body is kept because it usually carries the service's own
    diagnostic (bad key, quota, malformed payload) beyond the status code.
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Logging Error: status:{status_code} {body}")


class EncodingError(ServiceLoggingError):
    """Raised when structured fields cannot be encoded as JSON."""
