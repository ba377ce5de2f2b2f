from discipline.domain.habit.repositories.habit_check_repository import (
    HabitCheckRepository,
)
from discipline.domain.habit.repositories.habit_repository import HabitRepository

__all__ = ["HabitCheckRepository", "HabitRepository"]
