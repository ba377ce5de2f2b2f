"""Habit statistics value object."""

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class HabitStats:
    """Aggregate view over the checks of one habit.

    Derived on demand from the set of check dates; never persisted.
    """

    habit_id: UUID
    total_checks: int
    current_streak: int
    max_streak: int
    last_check: Optional[date]

    @classmethod
    def empty(cls, habit_id: UUID) -> "HabitStats":
        return cls(
            habit_id=habit_id,
            total_checks=0,
            current_streak=0,
            max_streak=0,
            last_check=None,
        )
