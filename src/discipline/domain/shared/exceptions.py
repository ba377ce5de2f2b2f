"""Error taxonomy shared by both bounded contexts.

Two families live here:

``DomainException`` and its kinds
    What services raise. Each carries a stable ``ErrorCode`` that the HTTP
    layer maps to a status; the exception class only picks the default.

``StorageError`` and its kinds
    What repository adapters raise. They never leave the application
    services, which translate them into domain errors first.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients; values never change."""

    VALIDATION_ERROR = "VALIDATION_ERROR"

    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    WRONG_CREDENTIALS = "WRONG_CREDENTIALS"

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    OWNER_NOT_FOUND = "OWNER_NOT_FOUND"
    HABIT_NOT_FOUND = "HABIT_NOT_FOUND"
    CHECK_NOT_FOUND = "CHECK_NOT_FOUND"
    # Never shown to clients; answered as HABIT_NOT_FOUND
    WRONG_OWNER = "WRONG_OWNER"

    CONFLICT = "CONFLICT"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    DUPLICATE_HABIT = "DUPLICATE_HABIT"
    CHECK_ALREADY_EXISTS = "CHECK_ALREADY_EXISTS"

    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CHECK_DATE_NOT_ALLOWED = "CHECK_DATE_NOT_ALLOWED"

    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of every error a service may raise.

    Attributes
    ----------
    message
        Text that may be shown to the end user.
    code
        Stable ``ErrorCode``; defaults to the class's ``default_code``.
    details
        Extra context for logs. Not part of any response body.
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input is malformed or outside its allowed range."""

    default_code = ErrorCode.VALIDATION_ERROR


class BusinessRuleViolation(DomainException):
    """Input is well-formed but a domain rule forbids the operation."""

    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The write would duplicate something that already exists."""

    default_code = ErrorCode.CONFLICT


class AuthenticationError(DomainException):
    """The caller's credentials or token were not accepted."""

    default_code = ErrorCode.INVALID_TOKEN


class StorageUnavailableError(DomainException):
    """The store failed for a reason no domain error describes.

    The original storage exception is chained as ``__cause__`` for the logs;
    clients only ever see a generic message.
    """

    default_code = ErrorCode.STORAGE_UNAVAILABLE

    def __init__(
        self,
        message: str = "Storage is temporarily unavailable",
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class StorageError(Exception):
    """Any failure of the backing store, as reported by a repository adapter."""


class StorageConflictError(StorageError):
    """Rejected by a unique constraint."""


class StorageReferenceError(StorageError):
    """Rejected by a foreign key: the referenced row does not exist."""
