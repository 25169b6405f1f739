"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Transport failures (connection refused, TLS, DNS, timeouts) are not wrapped:
they surface as httpx.TransportError.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigError(ApplicationError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class UsageError(ApplicationError):
    """Raised when an operation is invoked with contract-violating arguments."""

    def __init__(self, message: str = "Invalid usage") -> None:
        super().__init__(message, code="VAL_USAGE")


class FetchError(ApplicationError):
    """
    Raised when the server answers with a non-success status or a body
    that cannot be decoded into the expected shape.
    """

    def __init__(self, endpoint: str, status_code: int, body: str) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"{endpoint} returned {status_code}: {body}",
            code="SYS_FETCH_FAILED",
        )


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")
