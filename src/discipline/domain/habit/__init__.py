"""Habit bounded context: habits, daily checks and their statistics."""

from discipline.domain.habit.aggregates import TITLE_MAX_LENGTH, Habit
from discipline.domain.habit.entities import HabitCheck
from discipline.domain.habit.exceptions import (
    CheckAlreadyExistsError,
    CheckDateNotAllowedError,
    CheckNotFoundError,
    DuplicateHabitError,
    HabitNotFoundError,
    OwnerNotFoundError,
    WrongOwnerError,
)
from discipline.domain.habit.repositories import (
    HabitCheckRepository,
    HabitRepository,
)
from discipline.domain.habit.services import compute_habit_stats
from discipline.domain.habit.value_objects import HabitStats

__all__ = [
    "TITLE_MAX_LENGTH",
    "CheckAlreadyExistsError",
    "CheckDateNotAllowedError",
    "CheckNotFoundError",
    "DuplicateHabitError",
    "Habit",
    "HabitCheck",
    "HabitCheckRepository",
    "HabitNotFoundError",
    "HabitRepository",
    "HabitStats",
    "OwnerNotFoundError",
    "WrongOwnerError",
    "compute_habit_stats",
]
