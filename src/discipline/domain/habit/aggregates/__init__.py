from discipline.domain.habit.aggregates.habit import TITLE_MAX_LENGTH, Habit

__all__ = ["TITLE_MAX_LENGTH", "Habit"]
