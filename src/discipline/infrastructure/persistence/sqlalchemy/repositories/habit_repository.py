"""SQLAlchemy implementation of HabitRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discipline.domain.habit.aggregates import Habit
from discipline.domain.habit.repositories import HabitRepository
from discipline.domain.shared.time import ensure_tz_aware
from discipline.infrastructure.persistence.sqlalchemy.models import HabitModel
from discipline.infrastructure.persistence.sqlalchemy.repositories._utils import (
    storage_errors,
)

logger = logging.getLogger(__name__)


class HabitRepositorySQLAlchemy(HabitRepository):
    """SQLAlchemy implementation of the HabitRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, habit: Habit) -> UUID:
        with storage_errors("habits.create"):
            self._session.add(self._map_to_model(habit))
            await self._session.flush()

        logger.debug("Inserted habit: %s", habit.id)
        return habit.id

    async def find_by_id(self, habit_id: UUID) -> Optional[Habit]:
        stmt = select(HabitModel).where(HabitModel.id == habit_id)
        with storage_errors("habits.find_by_id"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_owner(
        self,
        owner_id: UUID,
        limit: int,
        offset: int,
    ) -> list[Habit]:
        stmt = (
            select(HabitModel)
            .where(HabitModel.user_id == owner_id)
            # id only breaks created_at ties, so pages never overlap or skip
            .order_by(HabitModel.created_at, HabitModel.id)
            .limit(limit)
            .offset(offset)
        )
        with storage_errors("habits.find_by_owner"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def update(self, habit: Habit) -> bool:
        stmt = (
            update(HabitModel)
            .where(HabitModel.id == habit.id)
            .values(
                title=habit.title,
                description=habit.description,
                updated_at=habit.updated_at,
            )
        )
        with storage_errors("habits.update"):
            result = await self._session.execute(stmt)

        return result.rowcount > 0

    async def delete(self, habit_id: UUID) -> bool:
        stmt = delete(HabitModel).where(HabitModel.id == habit_id)
        with storage_errors("habits.delete"):
            result = await self._session.execute(stmt)

        deleted = result.rowcount > 0
        if deleted:
            logger.debug("Deleted habit: %s", habit_id)
        return deleted

    def _map_to_domain(self, model: HabitModel) -> Habit:
        return Habit.reconstitute(
            id=model.id,
            owner_id=model.user_id,
            title=model.title,
            description=model.description,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, habit: Habit) -> HabitModel:
        return HabitModel(
            id=habit.id,
            user_id=habit.owner_id,
            title=habit.title,
            description=habit.description,
            created_at=habit.created_at,
            updated_at=habit.updated_at,
        )
