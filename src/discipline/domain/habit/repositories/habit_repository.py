"""Habit repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from discipline.domain.habit.aggregates import Habit


class HabitRepository(ABC):
    """Repository interface for Habit aggregates.

    Implementations raise ``StorageConflictError`` when (owner_id, title) is
    already taken, ``StorageReferenceError`` when the owner does not exist,
    and ``StorageError`` for any other failure of the backing store.
    """

    @abstractmethod
    async def create(self, habit: Habit) -> UUID:
        """Persist a new habit and return its ID."""

    @abstractmethod
    async def find_by_id(self, habit_id: UUID) -> Optional[Habit]:
        """Find a habit by its ID."""

    @abstractmethod
    async def find_by_owner(
        self,
        owner_id: UUID,
        limit: int,
        offset: int,
    ) -> list[Habit]:
        """List an owner's habits in creation order.

        Habits created in the same instant come back ordered by id: the
        order is stable across pages, but which of them was inserted first
        is not recorded.
        """

    @abstractmethod
    async def update(self, habit: Habit) -> bool:
        """Update title/description. Returns False if the habit is gone."""

    @abstractmethod
    async def delete(self, habit_id: UUID) -> bool:
        """Delete a habit (cascading to its checks). Returns False if absent."""
