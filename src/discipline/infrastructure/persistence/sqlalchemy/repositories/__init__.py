# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for the habit domain."""

from discipline.infrastructure.persistence.sqlalchemy.repositories.habit_check_repository import (
    HabitCheckRepositorySQLAlchemy,
)
from discipline.infrastructure.persistence.sqlalchemy.repositories.habit_repository import (
    HabitRepositorySQLAlchemy,
)

__all__ = [
    "HabitCheckRepositorySQLAlchemy",
    "HabitRepositorySQLAlchemy",
]
