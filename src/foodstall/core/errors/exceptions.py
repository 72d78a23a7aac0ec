"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to JSON failure envelopes by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

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


class NotFoundError(AppException):
    """Raised when a requested or referenced document does not resolve.

    Example:
        raise NotFoundError("Food not found", resource="food", resource_id=food_id)
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when a unique value is already taken.

    Example:
        raise ConflictError("Email already in use.", details={"email": email})
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class ValidationError(AppException):
    """Raised when required input is missing or malformed.

    Raised before any persistence call is made.

    Example:
        raise ValidationError(
            "Please provide data to update.",
            errors=[{"field": "name", "message": "Field required"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when a request carries no valid session.

    Example:
        raise UnauthorizedError("You must be logged in to access this resource.")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when the session is valid but the role lacks the permission.

    Example:
        raise ForbiddenError(
            "Access denied. Insufficient permissions.",
            details={"required_permission": "delete-food"}
        )
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class ServiceUnavailableError(AppException):
    """Raised when a required backing service is unavailable.

    Example:
        raise ServiceUnavailableError("Session store unavailable")
    """

    message = "Service temporarily unavailable"
    error_code = "service_unavailable"
    status_code = 503
