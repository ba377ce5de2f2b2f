"""Row layout of the ``users`` table."""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from discipline.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

NAME_MAX_LENGTH = 100
# bcrypt digests are 60 chars; the slack leaves room for another scheme
PASSWORD_HASH_MAX_LENGTH = 255


class UserModel(Base, TimestampMixin):
    """One account. ``name`` is unique; habits reference ``id`` and cascade.

    Shares the habit tables' metadata, so the foreign key from ``habits``
    resolves and one ``create_all`` builds the whole schema.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String(PASSWORD_HASH_MAX_LENGTH),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserModel {self.id} {self.name!r}>"
