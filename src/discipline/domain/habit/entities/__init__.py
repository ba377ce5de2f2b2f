from discipline.domain.habit.entities.habit_check import HabitCheck

__all__ = ["HabitCheck"]
