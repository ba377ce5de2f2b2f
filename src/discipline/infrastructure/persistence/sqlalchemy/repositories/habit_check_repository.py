"""SQLAlchemy implementation of HabitCheckRepository."""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from discipline.domain.habit.entities import HabitCheck
from discipline.domain.habit.repositories import HabitCheckRepository
from discipline.domain.shared.time import ensure_tz_aware
from discipline.infrastructure.persistence.sqlalchemy.models import HabitCheckModel
from discipline.infrastructure.persistence.sqlalchemy.repositories._utils import (
    storage_errors,
)

logger = logging.getLogger(__name__)


class HabitCheckRepositorySQLAlchemy(HabitCheckRepository):
    """SQLAlchemy implementation of the HabitCheckRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, habit_id: UUID, check_date: date) -> None:
        with storage_errors("habit_checks.create"):
            self._session.add(HabitCheckModel(habit_id=habit_id, check_date=check_date))
            await self._session.flush()

        logger.debug("Inserted check for habit %s on %s", habit_id, check_date)

    async def delete(self, habit_id: UUID, check_date: date) -> bool:
        stmt = delete(HabitCheckModel).where(
            HabitCheckModel.habit_id == habit_id,
            HabitCheckModel.check_date == check_date,
        )
        with storage_errors("habit_checks.delete"):
            result = await self._session.execute(stmt)

        return result.rowcount > 0

    async def exists(self, habit_id: UUID, check_date: date) -> bool:
        stmt = select(HabitCheckModel.id).where(
            HabitCheckModel.habit_id == habit_id,
            HabitCheckModel.check_date == check_date,
        )
        with storage_errors("habit_checks.exists"):
            result = await self._session.execute(stmt)
            return result.first() is not None

    async def find_by_range(
        self,
        habit_id: UUID,
        date_from: date,
        date_to: date,
    ) -> list[HabitCheck]:
        stmt = (
            select(HabitCheckModel)
            .where(
                HabitCheckModel.habit_id == habit_id,
                HabitCheckModel.check_date >= date_from,
                HabitCheckModel.check_date <= date_to,
            )
            .order_by(HabitCheckModel.check_date)
        )
        with storage_errors("habit_checks.find_by_range"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def last_check_date(self, habit_id: UUID) -> Optional[date]:
        stmt = select(func.max(HabitCheckModel.check_date)).where(
            HabitCheckModel.habit_id == habit_id,
        )
        with storage_errors("habit_checks.last_check_date"):
            result = await self._session.execute(stmt)
            return result.scalar_one_or_none()

    async def count_by_habit(self, habit_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(HabitCheckModel)
            .where(HabitCheckModel.habit_id == habit_id)
        )
        with storage_errors("habit_checks.count_by_habit"):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    def _map_to_domain(self, model: HabitCheckModel) -> HabitCheck:
        return HabitCheck(
            id=model.id,
            habit_id=model.habit_id,
            check_date=model.check_date,
            created_at=ensure_tz_aware(model.created_at),
        )
