"""The account that owns habits."""

from datetime import datetime
from uuid import UUID, uuid4

from discipline.domain.shared.time import utc_now


class User:
    """An account: a unique login name plus a password digest.

    The digest is whatever PasswordHashingService produced; the aggregate
    neither creates nor checks it, and keeps it out of ``repr``. Identity
    is the id alone, so two instances loaded separately compare equal.
    """

    def __init__(
        self,
        name: str,
        password_hash: str,
        *,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        now = utc_now()
        self._id = id if id is not None else uuid4()
        self._name = name
        self._password_hash = password_hash
        self._created_at = created_at or now
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(cls, name: str, password_hash: str) -> "User":
        """A new account with a fresh id, created now."""
        return cls(name, password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild an account read back from storage."""
        return cls(
            name,
            password_hash,
            id=id,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_password_hash(self, password_hash: str) -> None:
        """Replace the stored digest and bump ``updated_at``."""
        self._password_hash = password_hash
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, User) and other._id == self._id

    def __hash__(self) -> int:
        return hash(("User", self._id))

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r})"
