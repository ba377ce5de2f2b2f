from discipline.domain.habit.value_objects.habit_stats import HabitStats

__all__ = ["HabitStats"]
