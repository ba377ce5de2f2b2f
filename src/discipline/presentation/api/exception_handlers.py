"""Turn domain errors into HTTP responses.

Every error body has the same two keys::

    {"detail": "<message for humans>", "code": "<ErrorCode value>"}

Status codes are decided here and nowhere else. A habit owned by someone
else is answered exactly like a habit that does not exist, so ids of
foreign habits cannot be discovered by probing.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from discipline.domain.shared.exceptions import (
    AuthenticationError,
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StorageUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HABIT_NOT_FOUND_MESSAGE = "Habit not found"
STORAGE_UNAVAILABLE_MESSAGE = "Service temporarily unavailable, please retry later"
INTERNAL_ERROR_MESSAGE = "An internal error occurred"

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.WRONG_CREDENTIALS: status.HTTP_403_FORBIDDEN,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.OWNER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.HABIT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CHECK_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WRONG_OWNER: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_HABIT: status.HTTP_409_CONFLICT,
    ErrorCode.CHECK_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.CHECK_DATE_NOT_ALLOWED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.STORAGE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Consulted in order when a subclass brings a code the table above lacks
_FALLBACK_BY_TYPE: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: DomainException) -> int:
    """HTTP status for ``exc``: by error code first, then by exception class."""
    mapped = ERROR_CODE_TO_STATUS.get(exc.code)
    if mapped is not None:
        return mapped
    for exc_type, status_code in _FALLBACK_BY_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _client_view(exc: DomainException) -> tuple[str, ErrorCode]:
    # Foreign habits look missing; storage internals stay on the server
    if exc.code is ErrorCode.WRONG_OWNER:
        return HABIT_NOT_FOUND_MESSAGE, ErrorCode.HABIT_NOT_FOUND
    if exc.code is ErrorCode.STORAGE_UNAVAILABLE:
        return STORAGE_UNAVAILABLE_MESSAGE, ErrorCode.STORAGE_UNAVAILABLE
    return exc.message, exc.code


def _error_response(
    status_code: int,
    detail: str,
    code: ErrorCode,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code.value},
        headers=headers,
    )


def _describe_validation_failure(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    where = ".".join(str(part) for part in first.get("loc", ()))
    what = first.get("msg", "Invalid request")
    return f"{where}: {what}" if where else what


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain, request-validation and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for(exc)
        detail, code = _client_view(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "%s %s failed with %s: %s (details=%s, cause=%r)",
                request.method,
                request.url.path,
                exc.code.value,
                exc.message,
                exc.details,
                exc.__cause__,
            )
        else:
            logger.warning(
                "%s %s rejected with %s: %s (details=%s)",
                request.method,
                request.url.path,
                exc.code.value,
                exc.message,
                exc.details,
            )

        challenge = (
            _BEARER_CHALLENGE
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return _error_response(status_code, detail, code, headers=challenge)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.debug(
            "%s %s has an invalid request: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            _describe_validation_failure(exc),
            ErrorCode.VALIDATION_ERROR,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Last resort: log with traceback, answer with an opaque 500."""
        logger.exception(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR_MESSAGE,
            ErrorCode.INTERNAL_ERROR,
        )
