"""Guarded access to store adapters from application services.

Every repository call made by a service goes through ``call_storage``. It
bounds the call with the configured timeout and turns unclassified adapter
failures into ``StorageUnavailableError`` with the cause chained.

Conflict and reference signals are passed through untouched because only
the calling service knows which domain error they stand for. Task
cancellation (``asyncio.CancelledError``) is never intercepted.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from discipline.domain.shared.exceptions import (
    StorageConflictError,
    StorageError,
    StorageReferenceError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_storage(
    awaitable: Awaitable[T],
    timeout: float | None,
    operation: str,
) -> T:
    """Await a store operation within ``timeout`` seconds.

    Parameters
    ----------
    awaitable
        The pending repository call
    timeout
        Upper bound in seconds, or None for no bound
    operation
        Short name used in logs and error details

    Raises
    ------
    StorageConflictError, StorageReferenceError
        Re-raised for the caller to classify
    StorageUnavailableError
        On timeout or any other StorageError
    """
    try:
        if timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout)
    except (StorageConflictError, StorageReferenceError):
        raise
    except asyncio.TimeoutError as e:
        logger.error("Storage operation '%s' timed out after %ss", operation, timeout)
        raise StorageUnavailableError(
            details={"operation": operation, "reason": "timeout"},
        ) from e
    except StorageError as e:
        logger.error("Storage operation '%s' failed: %s", operation, e)
        raise StorageUnavailableError(details={"operation": operation}) from e
