"""Unit tests for IdentityService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from discipline.domain.shared.exceptions import (
    StorageConflictError,
    StorageError,
    StorageUnavailableError,
    ValidationError,
)
from discipline_identity import (
    CredentialValidator,
    IdentityService,
    PasswordHashingService,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    WrongCredentialsError,
)

TEST_NAME = "alice"
TEST_PASSWORD = "pw12345678"
NEW_PASSWORD = "new-pw-87654321"


class _IdentityServiceTestBase:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.password_service = PasswordHashingService(rounds=4)
        self.service = IdentityService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            validator=CredentialValidator(),
        )

    def _stored_user(self, password: str = TEST_PASSWORD) -> User:
        user = User.create(TEST_NAME, self.password_service.hash(password))
        self.user_repo.find_by_id.return_value = user
        self.user_repo.find_by_name.return_value = user
        return user


class TestIdentityServiceConstruction:
    """Tests for constructor checks."""

    def test_missing_dependency_is_rejected(self):
        with pytest.raises(ValueError):
            IdentityService(
                user_repository=AsyncMock(),
                password_service=None,
                validator=CredentialValidator(),
            )


class TestRegister(_IdentityServiceTestBase):
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_persists_hashed_password(self):
        user = await self.service.register(TEST_NAME, TEST_PASSWORD)

        assert user.name == TEST_NAME
        assert user.password_hash != TEST_PASSWORD
        assert self.password_service.verify(TEST_PASSWORD, user.password_hash)
        self.user_repo.create.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_invalid_input_never_reaches_store(self):
        with pytest.raises(ValidationError):
            await self.service.register("1x", "short")

        self.user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_name(self):
        self.user_repo.create.side_effect = StorageConflictError("dup")

        with pytest.raises(UserAlreadyExistsError):
            await self.service.register(TEST_NAME, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_store_failure(self):
        self.user_repo.create.side_effect = StorageError("down")

        with pytest.raises(StorageUnavailableError):
            await self.service.register(TEST_NAME, TEST_PASSWORD)


class TestLogin(_IdentityServiceTestBase):
    """Tests for login and lookups."""

    @pytest.mark.asyncio
    async def test_login_success(self):
        user = self._stored_user()

        assert await self.service.login(TEST_NAME, TEST_PASSWORD) == user
        self.user_repo.find_by_name.assert_awaited_once_with(TEST_NAME)

    @pytest.mark.asyncio
    async def test_login_unknown_user(self):
        self.user_repo.find_by_name.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.login("nobody", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self):
        self._stored_user()

        with pytest.raises(WrongCredentialsError):
            await self.service.login(TEST_NAME, "wrong-password")

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.get_by_id(uuid4())

    @pytest.mark.asyncio
    async def test_get_by_name(self):
        user = self._stored_user()

        assert await self.service.get_by_name(TEST_NAME) == user
        self.user_repo.find_by_name.assert_awaited_once_with(TEST_NAME)

    @pytest.mark.asyncio
    async def test_get_by_name_missing(self):
        self.user_repo.find_by_name.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.get_by_name("nobody")


class TestChangePassword(_IdentityServiceTestBase):
    """Tests for change_password."""

    @pytest.mark.asyncio
    async def test_change_password(self):
        user = self._stored_user()
        self.user_repo.update.return_value = True

        updated = await self.service.change_password(user.id, TEST_PASSWORD, NEW_PASSWORD)

        assert self.password_service.verify(NEW_PASSWORD, updated.password_hash)
        assert not self.password_service.verify(TEST_PASSWORD, updated.password_hash)
        self.user_repo.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wrong_current_password(self):
        user = self._stored_user()

        with pytest.raises(WrongCredentialsError):
            await self.service.change_password(user.id, "wrong-password", NEW_PASSWORD)

        self.user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_weak_new_password(self):
        user = self._stored_user()

        with pytest.raises(ValidationError):
            await self.service.change_password(user.id, TEST_PASSWORD, "short")

        self.user_repo.update.assert_not_called()


class TestDeleteAccount(_IdentityServiceTestBase):
    """Tests for delete_account."""

    @pytest.mark.asyncio
    async def test_delete_account(self):
        user = self._stored_user()
        self.user_repo.delete.return_value = True

        await self.service.delete_account(user.id, TEST_PASSWORD)

        self.user_repo.delete.assert_awaited_once_with(user.id)

    @pytest.mark.asyncio
    async def test_wrong_password_keeps_account(self):
        user = self._stored_user()

        with pytest.raises(WrongCredentialsError):
            await self.service.delete_account(user.id, "wrong-password")

        self.user_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.delete_account(uuid4(), TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_deleted_meanwhile(self):
        user = self._stored_user()
        self.user_repo.delete.return_value = False

        with pytest.raises(UserNotFoundError):
            await self.service.delete_account(user.id, TEST_PASSWORD)
