"""SQLAlchemy persistence for accounts."""

from discipline_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from discipline_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserModel",
    "UserRepositorySQLAlchemy",
]
