# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for the habit domain."""

from discipline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
    TimestampMixin,
)
from discipline.infrastructure.persistence.sqlalchemy.models.habit_check_model import (
    HabitCheckModel,
)
from discipline.infrastructure.persistence.sqlalchemy.models.habit_model import (
    HabitModel,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "HabitCheckModel",
    "HabitModel",
    "TimestampMixin",
]
