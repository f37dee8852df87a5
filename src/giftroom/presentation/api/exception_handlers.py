"""Centralized exception handling for the API.

Use cases return classified failures as values. Routers raise
``ValidationFailedError`` with that value and the handler registered here
turns it into a consistent JSON error response.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from giftroom.domain.shared import ValidationErrorKind, ValidationResult

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"

_STATUS_BY_KIND: dict[ValidationErrorKind, int] = {
    ValidationErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ValidationErrorKind.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    ValidationErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
}


class ValidationFailedError(Exception):
    """Carries a use case failure out of a route handler."""

    def __init__(self, failure: ValidationResult):
        self.failure = failure
        super().__init__(failure.message)


def get_status_for_failure(failure: ValidationResult) -> int:
    """Map a failure kind to its HTTP status code."""
    return _STATUS_BY_KIND.get(failure.kind, status.HTTP_400_BAD_REQUEST)


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    errors: list[dict[str, str]] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
            "errors": errors or [],
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(
        request: Request,
        exc: ValidationFailedError,
    ) -> JSONResponse:
        failure = exc.failure
        logger.warning(
            "Request rejected on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            failure.message,
            failure.kind.value,
        )
        return _create_error_response(
            status_code=get_status_for_failure(failure),
            message=failure.message,
            code=failure.kind.value,
            errors=[{"field": e.field, "message": e.message} for e in failure.errors],
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=INTERNAL_ERROR_CODE,
        )
