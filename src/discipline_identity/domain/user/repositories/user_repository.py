"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from discipline_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    ``create`` raises ``StorageConflictError`` when the name is taken; any
    other failure of the backing store surfaces as ``StorageError``.
    """

    @abstractmethod
    async def create(self, user: User) -> None:
        """Persist a new user."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by their login name."""

    @abstractmethod
    async def update(self, user: User) -> bool:
        """Update a user. Returns False if the user no longer exists."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete a user and everything they own. Returns False if absent."""
