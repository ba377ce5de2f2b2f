"""Identity service for user registration, login and account management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from discipline.application.storage import call_storage
from discipline.domain.shared.exceptions import StorageConflictError
from discipline_identity.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from discipline_identity.exceptions import WrongCredentialsError

if TYPE_CHECKING:
    from discipline_identity.domain.user import UserRepository
    from discipline_identity.services import (
        CredentialValidator,
        PasswordHashingService,
    )

logger = logging.getLogger(__name__)


class IdentityService:
    """
    Application service for user identity.

    Orchestrates credential validation, password hashing and the user
    store to provide:
    - User registration
    - Login with password
    - Account lookup by ID or name
    - Password change
    - Account deletion (password re-verified first)

    Token issuance is not part of this service; the API issues a token
    through TokenService once login succeeds.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        validator: CredentialValidator,
        timeout: float | None = None,
    ):
        if user_repository is None or password_service is None or validator is None:
            msg = "IdentityService requires a repository, hasher and validator"
            raise ValueError(msg)
        self._user_repo = user_repository
        self._password_service = password_service
        self._validator = validator
        self._timeout = timeout

    async def register(self, name: str, password: str) -> User:
        self._validator.validate_registration(name, password)

        password_hash = self._password_service.hash(password)
        user = User.create(name, password_hash)

        try:
            await call_storage(
                self._user_repo.create(user),
                self._timeout,
                "users.create",
            )
        except StorageConflictError as e:
            logger.info("Registration rejected, name already taken: %s", name)
            raise UserAlreadyExistsError(name) from e

        logger.info("User registered: %s (id: %s)", name, user.id)
        return user

    async def login(self, name: str, password: str) -> User:
        user = await self.get_by_name(name)
        self._verify_password(user, password)

        logger.info("User logged in: %s", name)
        return user

    async def get_by_id(self, user_id: UUID) -> User:
        user = await call_storage(
            self._user_repo.find_by_id(user_id),
            self._timeout,
            "users.find_by_id",
        )
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def get_by_name(self, name: str) -> User:
        user = await call_storage(
            self._user_repo.find_by_name(name),
            self._timeout,
            "users.find_by_name",
        )
        if user is None:
            raise UserNotFoundError(name)
        return user

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> User:
        user = await self.get_by_id(user_id)
        self._verify_password(user, current_password)
        self._validator.validate_password(new_password)

        user.change_password_hash(self._password_service.hash(new_password))
        updated = await call_storage(
            self._user_repo.update(user),
            self._timeout,
            "users.update",
        )
        if not updated:
            raise UserNotFoundError(str(user_id))

        logger.info("Password changed for user: %s", user_id)
        return user

    async def delete_account(self, user_id: UUID, password: str) -> None:
        user = await self.get_by_id(user_id)
        self._verify_password(user, password)

        deleted = await call_storage(
            self._user_repo.delete(user.id),
            self._timeout,
            "users.delete",
        )
        if not deleted:
            raise UserNotFoundError(str(user_id))

        logger.info("User account deleted: %s", user_id)

    def _verify_password(self, user: User, password: str) -> None:
        if not self._password_service.verify(password, user.password_hash):
            logger.warning("Wrong password for user: %s", user.id)
            raise WrongCredentialsError
