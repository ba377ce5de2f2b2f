"""Habit service: creation, listing and ownership-checked access."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from discipline.application.services.ownership import load_owned_habit
from discipline.application.storage import call_storage
from discipline.domain.habit import (
    DuplicateHabitError,
    Habit,
    HabitNotFoundError,
    OwnerNotFoundError,
)
from discipline.domain.shared.exceptions import (
    StorageConflictError,
    StorageReferenceError,
    ValidationError,
)

if TYPE_CHECKING:
    from discipline.domain.habit import HabitRepository

logger = logging.getLogger(__name__)


class HabitService:
    """
    Application service for habits.

    Enforces per-owner title uniqueness (through the store's constraint)
    and ownership on read, update and delete. ``WrongOwnerError`` and
    ``HabitNotFoundError`` stay distinct here; hiding the difference is the
    API layer's job.
    """

    def __init__(
        self,
        habit_repository: HabitRepository,
        timeout: float | None = None,
    ):
        if habit_repository is None:
            msg = "HabitService requires a habit repository"
            raise ValueError(msg)
        self._habit_repo = habit_repository
        self._timeout = timeout

    async def create_habit(
        self,
        owner_id: UUID,
        title: str,
        description: Optional[str] = None,
    ) -> Habit:
        habit = Habit.create(owner_id=owner_id, title=title, description=description)

        try:
            habit_id = await call_storage(
                self._habit_repo.create(habit),
                self._timeout,
                "habits.create",
            )
        except StorageReferenceError as e:
            raise OwnerNotFoundError(owner_id) from e
        except StorageConflictError as e:
            raise DuplicateHabitError(owner_id, habit.title) from e

        created = await call_storage(
            self._habit_repo.find_by_id(habit_id),
            self._timeout,
            "habits.find_by_id",
        )
        if created is None:
            raise HabitNotFoundError(habit_id)

        logger.info("Habit created: %s (owner: %s)", created.id, owner_id)
        return created

    async def get_user_habits(
        self,
        owner_id: UUID,
        limit: int,
        offset: int,
    ) -> list[Habit]:
        if limit < 1:
            msg = "limit must be at least 1"
            raise ValidationError(msg, details={"field": "limit", "value": limit})
        if offset < 0:
            msg = "offset cannot be negative"
            raise ValidationError(msg, details={"field": "offset", "value": offset})

        return await call_storage(
            self._habit_repo.find_by_owner(owner_id, limit, offset),
            self._timeout,
            "habits.find_by_owner",
        )

    async def get_habit(self, habit_id: UUID, requester_id: UUID) -> Habit:
        return await self._get_owned_habit(habit_id, requester_id)

    async def update_habit(
        self,
        habit_id: UUID,
        requester_id: UUID,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Habit:
        habit = await self._get_owned_habit(habit_id, requester_id)

        if title is not None:
            habit.rename(title)
        if description is not None:
            habit.describe(description)

        try:
            updated = await call_storage(
                self._habit_repo.update(habit),
                self._timeout,
                "habits.update",
            )
        except StorageConflictError as e:
            raise DuplicateHabitError(requester_id, habit.title) from e

        if not updated:
            raise HabitNotFoundError(habit_id)

        logger.info("Habit updated: %s", habit_id)
        return habit

    async def delete_habit(self, habit_id: UUID, requester_id: UUID) -> None:
        await self._get_owned_habit(habit_id, requester_id)

        deleted = await call_storage(
            self._habit_repo.delete(habit_id),
            self._timeout,
            "habits.delete",
        )
        if not deleted:
            raise HabitNotFoundError(habit_id)

        logger.info("Habit deleted: %s (owner: %s)", habit_id, requester_id)

    async def _get_owned_habit(self, habit_id: UUID, requester_id: UUID) -> Habit:
        return await load_owned_habit(
            self._habit_repo,
            habit_id,
            requester_id,
            self._timeout,
        )
