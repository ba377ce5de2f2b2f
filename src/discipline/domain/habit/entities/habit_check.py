"""HabitCheck entity."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class HabitCheck:
    """A record that a habit was performed on a calendar date.

    Checks are created and removed, never updated in place. ``id`` is the
    store-assigned sequence number.
    """

    id: int
    habit_id: UUID
    check_date: date
    created_at: datetime
