"""Verified identity of the caller of a request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from discipline_identity.domain.user import User


@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Immutable identity produced by RequestAuthenticationGate.

    Handlers receive it as an explicit parameter; it is the only trusted
    source of ``user_id`` for ownership checks.
    """

    user_id: UUID
    username: str

    @classmethod
    def create(cls, user: User) -> AuthenticatedIdentity:
        return cls(user_id=user.id, username=user.name)

    def __str__(self) -> str:
        return f"AuthenticatedIdentity({self.username})"
