"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent error
format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Form validation failures (422) additionally carry ``field_errors``,
``non_field_errors`` and the submitted ``values`` so the form can be shown
again with every problem annotated.

Usage:
    from snipbox.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse, Response

from snipbox.application.exceptions import LoginRequiredError
from snipbox.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RepositoryFailureError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"

# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - undecodable input
    ErrorCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SNIPPET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 422 Unprocessable Entity - field rule violations
    ErrorCode.VALIDATION_ERROR: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_EXPIRY: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # 500 Internal Server Error
    ErrorCode.STORAGE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationFailedError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY

    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:  # noqa: C901
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
        logger.warning(
            "Form rejected on %s %s: fields=%s non_field=%d",
            request.method,
            request.url.path,
            sorted(exc.field_errors),
            len(exc.non_field_errors),
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": exc.message,
                "code": exc.code.value,
                "field_errors": exc.field_errors,
                "non_field_errors": exc.non_field_errors,
                "values": exc.values,
            },
        )

    @app.exception_handler(RepositoryFailureError)
    async def repository_failure_handler(
        request: Request,
        exc: RepositoryFailureError,
    ) -> JSONResponse:
        """Storage failures never leak internals to the client."""
        logger.error(
            "Storage failure on %s %s: operation=%s reason=%s",
            request.method,
            request.url.path,
            exc.operation,
            exc.reason,
            exc_info=exc.__cause__,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
            code=exc.code.value,
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle remaining domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        message = exc.message
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            message = INTERNAL_ERROR_MESSAGE

        return _create_error_response(
            status_code=status_code,
            message=message,
            code=exc.code.value,
        )

    @app.exception_handler(LoginRequiredError)
    async def login_required_handler(
        request: Request,
        exc: LoginRequiredError,
    ) -> Response:
        logger.debug("Anonymous request for %s diverted to login", exc.requested_path)
        return RedirectResponse(exc.login_path, status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Bodies that cannot be decoded are a client error, not a form error."""
        logger.info(
            "Undecodable request on %s %s: %d error(s)",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Bad Request",
            code=ErrorCode.BAD_REQUEST.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all so clients always receive the same error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=INTERNAL_ERROR_MESSAGE,
            code=ErrorCode.INTERNAL_ERROR.value,
        )
