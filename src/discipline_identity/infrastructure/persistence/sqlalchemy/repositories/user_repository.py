"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discipline.domain.shared.time import ensure_tz_aware
from discipline.infrastructure.persistence.sqlalchemy.repositories._utils import (
    storage_errors,
)
from discipline_identity.domain.user import User, UserRepository
from discipline_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> None:
        with storage_errors("users.create"):
            self._session.add(self._map_to_model(user))
            await self._session.flush()

        logger.debug("Inserted user: %s", user.id)

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        return await self._find_one(stmt, "users.find_by_id")

    async def find_by_name(self, name: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.name == name)
        return await self._find_one(stmt, "users.find_by_name")

    async def update(self, user: User) -> bool:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user.id)
            .values(
                name=user.name,
                password_hash=user.password_hash,
                updated_at=user.updated_at,
            )
        )
        with storage_errors("users.update"):
            result = await self._session.execute(stmt)

        return result.rowcount > 0

    async def delete(self, user_id: UUID) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        with storage_errors("users.delete"):
            result = await self._session.execute(stmt)

        deleted = result.rowcount > 0
        if deleted:
            logger.debug("Deleted user and all owned habits: %s", user_id)
        return deleted

    async def _find_one(self, stmt, operation: str) -> Optional[User]:
        with storage_errors(operation):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
