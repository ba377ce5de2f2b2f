from discipline_identity.domain.user.aggregates import User
from discipline_identity.domain.user.exceptions import (
    UserAlreadyExistsError,
    UserNotFoundError,
)
from discipline_identity.domain.user.repositories import UserRepository

__all__ = [
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
