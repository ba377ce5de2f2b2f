"""Unit tests for streak and count aggregation."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from discipline.domain.habit.services import compute_habit_stats, split_into_streaks

TODAY = date(2024, 6, 15)


def days_ago(*offsets: int) -> list[date]:
    return [TODAY - timedelta(days=offset) for offset in offsets]


class TestSplitIntoStreaks:
    """Tests for split_into_streaks."""

    def test_empty_input_has_no_runs(self):
        assert split_into_streaks([]) == []

    def test_consecutive_days_form_one_run(self):
        runs = split_into_streaks(days_ago(2, 1, 0))

        assert runs == [(TODAY - timedelta(days=2), TODAY)]

    def test_gap_splits_runs(self):
        runs = split_into_streaks(days_ago(5, 4, 1, 0))

        assert runs == [
            (TODAY - timedelta(days=5), TODAY - timedelta(days=4)),
            (TODAY - timedelta(days=1), TODAY),
        ]

    def test_duplicates_and_order_are_ignored(self):
        dates = [TODAY, TODAY - timedelta(days=1), TODAY, TODAY - timedelta(days=1)]

        assert split_into_streaks(dates) == [(TODAY - timedelta(days=1), TODAY)]

    def test_month_boundary_is_consecutive(self):
        runs = split_into_streaks([date(2024, 2, 29), date(2024, 3, 1)])

        assert runs == [(date(2024, 2, 29), date(2024, 3, 1))]


class TestComputeHabitStats:
    """Tests for compute_habit_stats."""

    def setup_method(self):
        self.habit_id = uuid4()

    def test_no_checks_gives_empty_stats(self):
        stats = compute_habit_stats(self.habit_id, [], TODAY)

        assert stats.total_checks == 0
        assert stats.current_streak == 0
        assert stats.max_streak == 0
        assert stats.last_check is None
        assert stats.habit_id == self.habit_id

    def test_streak_ending_today(self):
        stats = compute_habit_stats(self.habit_id, days_ago(2, 1, 0), TODAY)

        assert stats.total_checks == 3
        assert stats.current_streak == 3
        assert stats.max_streak == 3
        assert stats.last_check == TODAY

    def test_streak_ending_yesterday_survives_default_grace(self):
        stats = compute_habit_stats(self.habit_id, days_ago(3, 2, 1), TODAY)

        assert stats.current_streak == 3
        assert stats.last_check == TODAY - timedelta(days=1)

    def test_streak_ending_yesterday_breaks_without_grace(self):
        stats = compute_habit_stats(
            self.habit_id,
            days_ago(3, 2, 1),
            TODAY,
            grace_days=0,
        )

        assert stats.current_streak == 0
        assert stats.max_streak == 3

    def test_streak_older_than_grace_is_broken(self):
        stats = compute_habit_stats(self.habit_id, days_ago(4, 3, 2), TODAY)

        assert stats.current_streak == 0
        assert stats.max_streak == 3
        assert stats.total_checks == 3

    def test_max_streak_comes_from_earlier_run(self):
        dates = days_ago(10, 9, 8, 7, 1, 0)

        stats = compute_habit_stats(self.habit_id, dates, TODAY)

        assert stats.max_streak == 4
        assert stats.current_streak == 2
        assert stats.total_checks == 6

    def test_duplicate_dates_count_once(self):
        stats = compute_habit_stats(self.habit_id, [TODAY, TODAY], TODAY)

        assert stats.total_checks == 1
        assert stats.current_streak == 1

    def test_future_dates_are_ignored(self):
        dates = [TODAY + timedelta(days=1), TODAY]

        stats = compute_habit_stats(self.habit_id, dates, TODAY)

        assert stats.total_checks == 1
        assert stats.last_check == TODAY

    def test_only_future_dates_gives_empty_stats(self):
        stats = compute_habit_stats(self.habit_id, [TODAY + timedelta(days=3)], TODAY)

        assert stats.total_checks == 0
        assert stats.last_check is None

    def test_current_streak_never_exceeds_max_streak(self):
        dates = days_ago(6, 5, 3, 2, 1, 0)

        stats = compute_habit_stats(self.habit_id, dates, TODAY)

        assert stats.current_streak <= stats.max_streak <= stats.total_checks

    def test_negative_grace_is_rejected(self):
        with pytest.raises(ValueError):
            compute_habit_stats(self.habit_id, [TODAY], TODAY, grace_days=-1)
