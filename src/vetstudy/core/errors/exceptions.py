"""Domain exceptions for the application.

These exceptions are converted to RFC 7807 Problem Details responses
by the exception handlers. Authorization failures raised by route
guards are the most common source.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid.

    Example:
        raise UnauthorizedError("Invalid access token")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when the caller's role does not grant access.

    Example:
        raise ForbiddenError(
            "Insufficient permissions",
            details={"required_permissions": ["delete_patient"]}
        )
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403
