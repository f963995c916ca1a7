"""
Exception hierarchy for the Doppler client library.

Errors raised by the API are mapped onto these classes by status code.
Errors detected before any request is sent (invalid body params, a
malformed request) use the same hierarchy without a status code.
"""

from typing import Any, Dict, Optional


class DopplerClientError(Exception):
    """
    Base exception for all Doppler client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if the error came from a response)
        details: Additional error details, e.g. the decoded error body
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Client-side errors
# =============================================================================


class RequestBuildError(DopplerClientError):
    """A request could not be constructed (bad method or path)."""

    def __init__(
        self,
        message: str = "Invalid request",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(DopplerClientError):
    """
    Request validation failed.

    Raised for 400 responses and for parameters rejected locally before
    a request is sent.
    """

    def __init__(
        self,
        message: str = "Validation error",
        *,
        status_code: Optional[int] = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class WorkplaceRoleConflictError(ValidationError):
    """A workplace role was given both an identifier and permissions."""

    def __init__(
        self,
        message: str = "you may provide an identifier OR permissions, but not both",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


# =============================================================================
# Authentication / Authorization Errors (401, 403)
# =============================================================================


class AuthenticationError(DopplerClientError):
    """The token is missing, invalid or revoked."""

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class AuthorizationError(DopplerClientError):
    """The token lacks the workplace permission for this operation."""

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Not Found / Conflict Errors (404, 409)
# =============================================================================


class NotFoundError(DopplerClientError):
    """Requested resource was not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class ConflictError(DopplerClientError):
    """Request conflicts with the current state of the resource."""

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Rate Limit Errors (429)
# =============================================================================


class RateLimitError(DopplerClientError):
    """
    Rate limit exceeded.

    The retry_after attribute holds the server's Retry-After value in
    seconds, when it sent one.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
        self.retry_after = retry_after


# =============================================================================
# Server Errors (5xx)
# =============================================================================


class ServerError(DopplerClientError):
    """Server-side error occurred."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(DopplerClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport failure before a response was received.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=None, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> DopplerClientError:
    """
    Create an appropriate exception from an HTTP error response.

    Args:
        status_code: HTTP status code
        message: Error message
        details: Additional error details

    Returns:
        Appropriate DopplerClientError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else DopplerClientError
    return exception_class(
        message,
        status_code=status_code,
        details=details,
    )
