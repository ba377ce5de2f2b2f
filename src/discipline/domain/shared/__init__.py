"""Shared domain building blocks."""

from discipline.domain.shared.exceptions import (
    AuthenticationError,
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    StorageConflictError,
    StorageError,
    StorageReferenceError,
    StorageUnavailableError,
    ValidationError,
)
from discipline.domain.shared.time import (
    ensure_tz_aware,
    today_utc,
    utc_date,
    utc_now,
)

__all__ = [
    "AuthenticationError",
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "StorageConflictError",
    "StorageError",
    "StorageReferenceError",
    "StorageUnavailableError",
    "ValidationError",
    "ensure_tz_aware",
    "today_utc",
    "utc_date",
    "utc_now",
]
