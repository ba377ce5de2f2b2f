"""SQLAlchemy model for Habit aggregate."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from discipline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class HabitModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting Habit aggregates.

    Titles are unique per owner. Deleting the owning user removes the habit,
    and deleting the habit removes its checks (ON DELETE CASCADE).

    Table: habits
    """

    __tablename__ = "habits"
    __table_args__ = (
        UniqueConstraint("user_id", "title", name="uq_habits_user_title"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default="",
    )

    def __repr__(self) -> str:
        return f"<HabitModel(id={self.id}, user_id={self.user_id}, title={self.title})>"
