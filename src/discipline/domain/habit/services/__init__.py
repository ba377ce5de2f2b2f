from discipline.domain.habit.services.streak_calculator import (
    DEFAULT_GRACE_DAYS,
    compute_habit_stats,
    split_into_streaks,
)

__all__ = ["DEFAULT_GRACE_DAYS", "compute_habit_stats", "split_into_streaks"]
