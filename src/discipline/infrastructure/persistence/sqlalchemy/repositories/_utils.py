"""Shared utilities for SQLAlchemy repositories."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from discipline.domain.shared.exceptions import (
    StorageConflictError,
    StorageError,
    StorageReferenceError,
)

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

# SQLite reports constraint failures only through the message text
_SQLITE_UNIQUE = "UNIQUE constraint failed"
_SQLITE_FOREIGN_KEY = "FOREIGN KEY constraint failed"


def classify_integrity_error(error: IntegrityError, operation: str) -> StorageError:
    """
    Map an IntegrityError onto the storage signal the services understand.

    asyncpg errors expose the SQLSTATE as ``sqlstate`` (also ``pgcode``);
    SQLite only offers the message.
    """
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    message = str(orig)

    if sqlstate == UNIQUE_VIOLATION or _SQLITE_UNIQUE in message:
        return StorageConflictError(f"{operation}: unique constraint violated")
    if sqlstate == FOREIGN_KEY_VIOLATION or _SQLITE_FOREIGN_KEY in message:
        return StorageReferenceError(f"{operation}: referenced row does not exist")
    return StorageError(f"{operation}: integrity error")


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures raised inside the block into StorageError."""
    try:
        yield
    except IntegrityError as e:
        raise classify_integrity_error(e, operation) from e
    except SQLAlchemyError as e:
        msg = f"{operation}: {type(e).__name__}"
        raise StorageError(msg) from e
