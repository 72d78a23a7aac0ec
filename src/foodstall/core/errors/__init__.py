"""Error handling module with JSON failure envelopes."""

from foodstall.core.errors.exceptions import (
    AppException,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthorizedError,
    ValidationError,
)
from foodstall.core.errors.handlers import (
    ErrorEnvelope,
    FieldError,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "ConflictError",
    # Handlers
    "ErrorEnvelope",
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "ServiceUnavailableError",
    "UnauthorizedError",
    "ValidationError",
    "register_exception_handlers",
]
