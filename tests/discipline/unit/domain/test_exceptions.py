"""Tests for the shared error taxonomy."""

import pytest

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


@pytest.mark.parametrize(
    ("exc_type", "code"),
    [
        (DomainException, ErrorCode.INTERNAL_ERROR),
        (ValidationError, ErrorCode.VALIDATION_ERROR),
        (BusinessRuleViolation, ErrorCode.BUSINESS_RULE_VIOLATION),
        (EntityNotFoundError, ErrorCode.ENTITY_NOT_FOUND),
        (ConflictError, ErrorCode.CONFLICT),
        (AuthenticationError, ErrorCode.INVALID_TOKEN),
    ],
)
def test_each_kind_has_its_default_code(exc_type, code):
    assert exc_type("boom").code is code


def test_explicit_code_wins_over_default():
    error = AuthenticationError("expired", code=ErrorCode.TOKEN_EXPIRED)

    assert error.code is ErrorCode.TOKEN_EXPIRED


def test_message_and_details():
    error = ValidationError("bad title", details={"field": "title"})

    assert str(error) == "bad title"
    assert error.details == {"field": "title"}
    assert ValidationError("bad").details == {}


def test_details_are_copied():
    details = {"field": "title"}
    error = ValidationError("bad title", details=details)
    details["field"] = "changed"

    assert error.details == {"field": "title"}


def test_storage_unavailable_has_generic_message():
    error = StorageUnavailableError()

    assert error.code is ErrorCode.STORAGE_UNAVAILABLE
    assert "temporarily unavailable" in error.message


def test_storage_signals_are_not_domain_errors():
    assert issubclass(StorageConflictError, StorageError)
    assert issubclass(StorageReferenceError, StorageError)
    assert not issubclass(StorageError, DomainException)


def test_error_codes_are_plain_strings():
    assert ErrorCode.HABIT_NOT_FOUND == "HABIT_NOT_FOUND"
