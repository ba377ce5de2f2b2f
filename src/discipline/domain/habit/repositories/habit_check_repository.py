"""HabitCheck repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from uuid import UUID

from discipline.domain.habit.entities import HabitCheck


class HabitCheckRepository(ABC):
    """Repository interface for habit checks.

    Implementations raise ``StorageConflictError`` when (habit_id, check_date)
    already exists, ``StorageReferenceError`` when the habit does not exist,
    and ``StorageError`` for any other failure of the backing store.
    """

    @abstractmethod
    async def create(self, habit_id: UUID, check_date: date) -> None:
        """Record a check for the habit on the given date."""

    @abstractmethod
    async def delete(self, habit_id: UUID, check_date: date) -> bool:
        """Remove the check on the given date. Returns False if absent."""

    @abstractmethod
    async def exists(self, habit_id: UUID, check_date: date) -> bool:
        """Check whether the habit has a check on the given date."""

    @abstractmethod
    async def find_by_range(
        self,
        habit_id: UUID,
        date_from: date,
        date_to: date,
    ) -> list[HabitCheck]:
        """List checks with date_from <= check_date <= date_to, oldest first."""

    @abstractmethod
    async def last_check_date(self, habit_id: UUID) -> Optional[date]:
        """Return the most recent check date, or None without checks."""

    @abstractmethod
    async def count_by_habit(self, habit_id: UUID) -> int:
        """Count all checks of a habit."""
