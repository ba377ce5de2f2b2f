"""SQLAlchemy model for HabitCheck entity."""

from datetime import date
from uuid import UUID

from sqlalchemy import (
    Date,
    ForeignKey,
    Index,
    Integer,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from discipline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class HabitCheckModel(Base, CreatedAtMixin):
    """
    SQLAlchemy model for habit checks.

    One row per habit and calendar date. Rows are inserted and deleted,
    never updated, so there is no updated_at column.

    Table: habit_checks
    """

    __tablename__ = "habit_checks"
    __table_args__ = (
        UniqueConstraint("habit_id", "check_date", name="uq_habit_checks_habit_date"),
        Index("ix_habit_checks_habit_date", "habit_id", "check_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    habit_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("habits.id", ondelete="CASCADE"),
        nullable=False,
    )
    check_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<HabitCheckModel(habit_id={self.habit_id}, "
            f"check_date={self.check_date})>"
        )
