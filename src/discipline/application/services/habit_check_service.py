"""Habit check service: daily checks and habit statistics."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID

from discipline.application.services.ownership import load_owned_habit
from discipline.application.storage import call_storage
from discipline.domain.habit import (
    CheckAlreadyExistsError,
    CheckDateNotAllowedError,
    CheckNotFoundError,
    HabitNotFoundError,
    HabitStats,
    compute_habit_stats,
)
from discipline.domain.habit.services import DEFAULT_GRACE_DAYS
from discipline.domain.shared.exceptions import (
    StorageConflictError,
    StorageReferenceError,
    ValidationError,
)
from discipline.domain.shared.time import utc_date, utc_now

if TYPE_CHECKING:
    from discipline.domain.habit import (
        HabitCheck,
        HabitCheckRepository,
        HabitRepository,
    )

logger = logging.getLogger(__name__)


def _as_date(value: date) -> date:
    # datetime is a date subclass; comparing the two raises TypeError
    if isinstance(value, datetime):
        return utc_date(value)
    return value


class HabitCheckService:
    """
    Application service for habit checks.

    Rules enforced for every operation:
    - only the habit's owner may read or change its checks
    - at most one check per habit per calendar day
    - no checks on dates after today (UTC)

    Statistics follow the streak policy in
    ``discipline.domain.habit.services.streak_calculator``.
    """

    def __init__(
        self,
        habit_repository: HabitRepository,
        check_repository: HabitCheckRepository,
        timeout: float | None = None,
        clock: Callable[[], datetime] = utc_now,
        streak_grace_days: int = DEFAULT_GRACE_DAYS,
    ):
        if habit_repository is None or check_repository is None:
            msg = "HabitCheckService requires habit and check repositories"
            raise ValueError(msg)
        self._habit_repo = habit_repository
        self._check_repo = check_repository
        self._timeout = timeout
        self._clock = clock
        self._grace_days = streak_grace_days

    def _today(self) -> date:
        return utc_date(self._clock())

    async def check_habit(
        self,
        habit_id: UUID,
        requester_id: UUID,
        check_date: date,
    ) -> None:
        check_date = _as_date(check_date)
        await load_owned_habit(self._habit_repo, habit_id, requester_id, self._timeout)

        today = self._today()
        if check_date > today:
            raise CheckDateNotAllowedError(check_date, today)

        exists = await call_storage(
            self._check_repo.exists(habit_id, check_date),
            self._timeout,
            "habit_checks.exists",
        )
        if exists:
            raise CheckAlreadyExistsError(habit_id, check_date)

        try:
            await call_storage(
                self._check_repo.create(habit_id, check_date),
                self._timeout,
                "habit_checks.create",
            )
        except StorageConflictError as e:
            # Lost a race with a concurrent request for the same day
            raise CheckAlreadyExistsError(habit_id, check_date) from e
        except StorageReferenceError as e:
            raise HabitNotFoundError(habit_id) from e

        logger.info("Habit %s checked on %s", habit_id, check_date.isoformat())

    async def uncheck_habit(
        self,
        habit_id: UUID,
        requester_id: UUID,
        check_date: date,
    ) -> None:
        check_date = _as_date(check_date)
        await load_owned_habit(self._habit_repo, habit_id, requester_id, self._timeout)

        exists = await call_storage(
            self._check_repo.exists(habit_id, check_date),
            self._timeout,
            "habit_checks.exists",
        )
        if not exists:
            raise CheckNotFoundError(habit_id, check_date)

        deleted = await call_storage(
            self._check_repo.delete(habit_id, check_date),
            self._timeout,
            "habit_checks.delete",
        )
        if not deleted:
            raise CheckNotFoundError(habit_id, check_date)

        logger.info("Habit %s unchecked on %s", habit_id, check_date.isoformat())

    async def get_habit_checks(
        self,
        habit_id: UUID,
        requester_id: UUID,
        date_from: date,
        date_to: date,
    ) -> list[HabitCheck]:
        date_from = _as_date(date_from)
        date_to = _as_date(date_to)
        if date_from > date_to:
            msg = "date_from must not be after date_to"
            raise ValidationError(
                msg,
                details={
                    "date_from": date_from.isoformat(),
                    "date_to": date_to.isoformat(),
                },
            )

        await load_owned_habit(self._habit_repo, habit_id, requester_id, self._timeout)

        checks = await call_storage(
            self._check_repo.find_by_range(habit_id, date_from, date_to),
            self._timeout,
            "habit_checks.find_by_range",
        )
        return sorted(checks, key=lambda check: check.check_date)

    async def get_habit_stats(self, habit_id: UUID, requester_id: UUID) -> HabitStats:
        await load_owned_habit(self._habit_repo, habit_id, requester_id, self._timeout)

        last_check = await call_storage(
            self._check_repo.last_check_date(habit_id),
            self._timeout,
            "habit_checks.last_check_date",
        )
        if last_check is None:
            return HabitStats.empty(habit_id)

        checks = await call_storage(
            self._check_repo.find_by_range(habit_id, date.min, last_check),
            self._timeout,
            "habit_checks.find_by_range",
        )
        return compute_habit_stats(
            habit_id,
            (check.check_date for check in checks),
            today=self._today(),
            grace_days=self._grace_days,
        )
