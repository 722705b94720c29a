"""Error handling module with RFC 7807 Problem Details."""

from vetstudy.core.errors.exceptions import (
    AppException,
    ForbiddenError,
    UnauthorizedError,
)
from vetstudy.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "ProblemDetail",
    "UnauthorizedError",
    "register_exception_handlers",
]
