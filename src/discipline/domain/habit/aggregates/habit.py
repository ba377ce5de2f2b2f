"""Habit aggregate."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from discipline.domain.shared.exceptions import ValidationError
from discipline.domain.shared.time import utc_now

TITLE_MAX_LENGTH = 255


class Habit:
    """
    Habit aggregate root.

    A user-defined recurring activity. The pair (owner_id, title) is unique;
    the store enforces it, the aggregate only normalizes and validates the
    title itself.
    """

    def __init__(
        self,
        owner_id: UUID,
        title: str,
        description: str = "",
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._owner_id = owner_id
        self._title = self._normalize_title(title)
        self._description = description or ""
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def owner_id(self) -> UUID:
        return self._owner_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._owner_id == user_id

    def rename(self, title: str) -> None:
        self._title = self._normalize_title(title)
        self._updated_at = utc_now()

    def describe(self, description: str) -> None:
        self._description = description or ""
        self._updated_at = utc_now()

    @staticmethod
    def _normalize_title(title: str) -> str:
        normalized = (title or "").strip()
        if not normalized:
            msg = "Habit title cannot be empty"
            raise ValidationError(msg, details={"field": "title"})
        if len(normalized) > TITLE_MAX_LENGTH:
            msg = f"Habit title cannot exceed {TITLE_MAX_LENGTH} characters"
            raise ValidationError(msg, details={"field": "title"})
        return normalized

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        title: str,
        description: Optional[str] = None,
    ) -> "Habit":
        return cls(owner_id=owner_id, title=title, description=description or "")

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        owner_id: UUID,
        title: str,
        description: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Habit":
        return cls(
            id=id,
            owner_id=owner_id,
            title=title,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Habit):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Habit(id={self._id}, owner_id={self._owner_id}, title={self._title!r})"
