"""Exception handlers rendering the JSON failure envelope.

Every failure response has the shape ``{"message": ..., "error": ...}``
with optional extra detail keys, and the HTTP status that matches the
error condition.
"""

from typing import TYPE_CHECKING, Any, cast

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from foodstall.config import settings
from foodstall.core.errors.exceptions import AppException


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


logger = structlog.get_logger()


class FieldError(BaseModel):
    """Represents a single field validation error."""

    field: str
    message: str
    type: str | None = None


class ErrorEnvelope(BaseModel):
    """Failure response schema.

    Attributes:
        message: Human-readable explanation
        error: Machine-readable code, or the underlying error text
        errors: Field-level errors (validation failures only)
        request_id: Request ID for correlating with logs
    """

    message: str
    error: str | None = None
    errors: list[FieldError] | None = None
    request_id: str | None = None

    model_config = {"extra": "allow"}


def _get_request_id(request: Request) -> str | None:
    """Extract the request ID from request state if available."""
    return getattr(request.state, "request_id", None)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException subclasses to failure envelopes."""
    logger.warning(
        "app_exception",
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
    )

    content: dict[str, Any] = ErrorEnvelope(
        message=exc.message,
        error=exc.error_code,
        request_id=_get_request_id(request),
    ).model_dump(exclude_none=True)

    for key, value in exc.details.items():
        if key not in content:
            content[key] = value

    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert request validation failures to a 400 envelope.

    Missing fields, null values and empty strings in required fields all
    end up here before the handler runs.
    """
    errors: list[FieldError] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        # Skip "body" prefix in field path
        field_parts = [str(part) for part in loc if part != "body"]
        field = ".".join(field_parts) if field_parts else "body"

        errors.append(
            FieldError(
                field=field,
                message=error.get("msg", "Invalid value"),
                type=error.get("type"),
            )
        )

    logger.warning(
        "validation_error",
        path=str(request.url.path),
        error_count=len(errors),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorEnvelope(
            message="All required fields must be provided.",
            error="validation_error",
            errors=errors,
            request_id=_get_request_id(request),
        ).model_dump(exclude_none=True),
    )


async def integrity_exception_handler(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Unique constraint violations that slipped past service checks."""
    logger.warning(
        "integrity_error",
        path=str(request.url.path),
        error=str(exc.orig),
    )

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=ErrorEnvelope(
            message="Resource conflict",
            error=str(exc.orig),
            request_id=_get_request_id(request),
        ).model_dump(exclude_none=True),
    )


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Persistence failures surface immediately as internal errors."""
    logger.error(
        "database_error",
        path=str(request.url.path),
        error_type=type(exc).__name__,
        error=str(exc),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorEnvelope(
            message="Database operation failed",
            error=str(exc),
            request_id=_get_request_id(request),
        ).model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch all unhandled exceptions and return a generic 500 error.

    The exception text is only echoed to the client in debug mode.
    """
    logger.exception(
        "unhandled_exception",
        path=str(request.url.path),
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorEnvelope(
            message="An unexpected error occurred",
            error=str(exc) if settings.debug else "internal_error",
            request_id=_get_request_id(request),
        ).model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Call this function during app initialization:

        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(
        AppException, cast("ExceptionHandler", app_exception_handler)
    )
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(
        IntegrityError, cast("ExceptionHandler", integrity_exception_handler)
    )
    app.add_exception_handler(
        SQLAlchemyError, cast("ExceptionHandler", database_exception_handler)
    )
    app.add_exception_handler(Exception, generic_exception_handler)
