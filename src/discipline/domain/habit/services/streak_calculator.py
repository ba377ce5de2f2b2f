"""Streak and count aggregation over a habit's check dates.

Everything here is a pure function of the check-date set, so it can be
tested without any store.

Policy:
- Dates are de-duplicated and sorted ascending; dates after ``today`` are
  ignored (they cannot be created through the service, but the function
  does not trust its input).
- A streak is a maximal run of calendar-consecutive dates.
- ``max_streak`` is the longest run.
- ``current_streak`` is the trailing run, but only while its last date is
  no older than ``today - grace_days``. With the default grace of one day a
  habit checked yesterday keeps its streak until today is over; with
  ``grace_days=0`` an unchecked today breaks it immediately.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from uuid import UUID

from discipline.domain.habit.value_objects import HabitStats

DEFAULT_GRACE_DAYS = 1


def split_into_streaks(dates: Iterable[date]) -> list[tuple[date, date]]:
    """Return the (first, last) bounds of every run of consecutive dates."""
    ordered = sorted(set(dates))
    if not ordered:
        return []

    runs: list[tuple[date, date]] = []
    run_start = previous = ordered[0]
    for current in ordered[1:]:
        if current - previous != timedelta(days=1):
            runs.append((run_start, previous))
            run_start = current
        previous = current
    runs.append((run_start, previous))
    return runs


def _run_length(run: tuple[date, date]) -> int:
    first, last = run
    return (last - first).days + 1


def compute_habit_stats(
    habit_id: UUID,
    dates: Iterable[date],
    today: date,
    grace_days: int = DEFAULT_GRACE_DAYS,
) -> HabitStats:
    """Aggregate total count, streaks and last check date for one habit."""
    if grace_days < 0:
        msg = "grace_days cannot be negative"
        raise ValueError(msg)

    relevant = {d for d in dates if d <= today}
    if not relevant:
        return HabitStats.empty(habit_id)

    runs = split_into_streaks(relevant)
    trailing = runs[-1]
    last_check = trailing[1]

    current_streak = 0
    if (today - last_check).days <= grace_days:
        current_streak = _run_length(trailing)

    return HabitStats(
        habit_id=habit_id,
        total_checks=len(relevant),
        current_streak=current_streak,
        max_streak=max(_run_length(run) for run in runs),
        last_check=last_check,
    )
