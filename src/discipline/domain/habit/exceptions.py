"""Habit domain exceptions.

This module defines exceptions for the habit bounded context: ownership,
per-owner title uniqueness and the one-check-per-day rule.

These exceptions inherit from the shared DomainException base class and
provide semantic error information that maps to appropriate HTTP responses.
"""

from datetime import date
from uuid import UUID

from discipline.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)


class HabitNotFoundError(EntityNotFoundError):
    """Raised when a habit cannot be found."""

    def __init__(self, habit_id: UUID) -> None:
        super().__init__(
            message="Habit not found",
            code=ErrorCode.HABIT_NOT_FOUND,
            details={"habit_id": str(habit_id)},
        )


class WrongOwnerError(DomainException):
    """Raised when a user tries to access a habit owned by someone else.

    Kept distinct from HabitNotFoundError inside the core; the API renders
    both identically so existence is not leaked to non-owners.
    """

    def __init__(self, habit_id: UUID, requester_id: UUID) -> None:
        super().__init__(
            message="Habit owner and requesting user don't match",
            code=ErrorCode.WRONG_OWNER,
            details={"habit_id": str(habit_id), "requester_id": str(requester_id)},
        )


class OwnerNotFoundError(EntityNotFoundError):
    """Raised when a habit is created for a user that does not exist."""

    def __init__(self, owner_id: UUID) -> None:
        super().__init__(
            message="User to own the habit not found",
            code=ErrorCode.OWNER_NOT_FOUND,
            details={"owner_id": str(owner_id)},
        )


class DuplicateHabitError(ConflictError):
    """Raised when the owner already has a habit with the same title."""

    def __init__(self, owner_id: UUID, title: str) -> None:
        super().__init__(
            message=f"Habit '{title}' already exists",
            code=ErrorCode.DUPLICATE_HABIT,
            details={"owner_id": str(owner_id), "title": title},
        )


class CheckAlreadyExistsError(ConflictError):
    """Raised when the habit is already checked on the given date."""

    def __init__(self, habit_id: UUID, check_date: date) -> None:
        super().__init__(
            message=f"Habit already checked on {check_date.isoformat()}",
            code=ErrorCode.CHECK_ALREADY_EXISTS,
            details={"habit_id": str(habit_id), "check_date": check_date.isoformat()},
        )


class CheckNotFoundError(EntityNotFoundError):
    """Raised when there is no check for the habit on the given date."""

    def __init__(self, habit_id: UUID, check_date: date) -> None:
        super().__init__(
            message=f"Habit check on {check_date.isoformat()} not found",
            code=ErrorCode.CHECK_NOT_FOUND,
            details={"habit_id": str(habit_id), "check_date": check_date.isoformat()},
        )


class CheckDateNotAllowedError(BusinessRuleViolation):
    """Raised when a check is attempted for a date in the future."""

    def __init__(self, check_date: date, today: date) -> None:
        super().__init__(
            message="Can't check a habit on a date in the future",
            code=ErrorCode.CHECK_DATE_NOT_ALLOWED,
            details={"check_date": check_date.isoformat(), "today": today.isoformat()},
        )
