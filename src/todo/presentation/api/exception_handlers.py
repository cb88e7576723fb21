"""Translate exceptions into JSON error responses.

Body shape::

    {"detail": "<message>", "code": "<ErrorCode>"}

Request validation failures add ``"errors": [{"field", "message", "type"}]``.
Client mistakes and store failures are 400, a foreign record is 401, a
missing user is 404, and anything unexpected is 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DATABASE_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain error; unmapped codes fall back on the class."""
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, UnauthorizedError):
        return status.HTTP_401_UNAUTHORIZED
    return status.HTTP_400_BAD_REQUEST


def _error_body(message: str, code: ErrorCode, errors: list[dict] | None = None) -> dict:
    body: dict = {"detail": message, "code": code.value}
    if errors is not None:
        body["errors"] = errors
    return body


def _field_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


def setup_exception_handlers(app: FastAPI) -> None:
    """Attach the domain, validation and fallback handlers to ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning(
            "%s %s -> %s: %s %s",
            request.method,
            request.url.path,
            exc.code.value,
            exc.message,
            exc.details or "",
        )
        return JSONResponse(
            status_code=status_for(exc),
            content=_error_body(exc.message, exc.code),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = _field_errors(exc)
        logger.warning(
            "%s %s -> invalid request: %s",
            request.method,
            request.url.path,
            errors,
        )
        # 400 rather than FastAPI's default 422
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(
                "Invalid request data",
                ErrorCode.VALIDATION_ERROR,
                errors,
            ),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("%s %s -> unhandled error", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("An internal error occurred", ErrorCode.INTERNAL_ERROR),
        )
