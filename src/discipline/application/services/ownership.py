"""Ownership check shared by the habit and habit-check services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from discipline.application.storage import call_storage
from discipline.domain.habit import HabitNotFoundError, WrongOwnerError

if TYPE_CHECKING:
    from discipline.domain.habit import Habit, HabitRepository

logger = logging.getLogger(__name__)


async def load_owned_habit(
    habit_repository: HabitRepository,
    habit_id: UUID,
    requester_id: UUID,
    timeout: float | None,
) -> Habit:
    """Load a habit and make sure ``requester_id`` owns it.

    Raises
    ------
    HabitNotFoundError
        If no habit has this ID
    WrongOwnerError
        If the habit belongs to another user
    """
    habit = await call_storage(
        habit_repository.find_by_id(habit_id),
        timeout,
        "habits.find_by_id",
    )
    if habit is None:
        raise HabitNotFoundError(habit_id)
    if not habit.is_owned_by(requester_id):
        logger.warning(
            "User %s tried to access habit %s owned by someone else",
            requester_id,
            habit_id,
        )
        raise WrongOwnerError(habit_id, requester_id)
    return habit
