"""Request authentication gate.

Turns a raw ``Authorization`` header into a verified AuthenticatedIdentity.
Each step either passes or ends the request with one specific error:

1. header is exactly ``Bearer <token>``          -> else InvalidTokenError
2. signature/algorithm/payload verify            -> else InvalidTokenError
3. now is inside [not_before, expires_at)        -> else TokenExpiredError
4. ``sub`` claim parses as a UUID                -> else InvalidTokenError
5. the user still exists                         -> else UserNotFoundError
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from discipline.domain.shared.time import utc_now
from discipline_identity.application.context import AuthenticatedIdentity
from discipline_identity.exceptions import InvalidTokenError, TokenExpiredError

if TYPE_CHECKING:
    from discipline_identity.application.services.identity_service import (
        IdentityService,
    )
    from discipline_identity.services import TokenService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from a ``Bearer <token>`` header value.

    Raises
    ------
    InvalidTokenError
        If the header is missing or not exactly two space-separated parts
        with the ``Bearer`` scheme
    """
    if not authorization:
        msg = "Authorization header is missing"
        raise InvalidTokenError(msg)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:
        msg = "Authorization header must be 'Bearer <token>'"
        raise InvalidTokenError(msg)

    return parts[1]


class RequestAuthenticationGate:
    """Linear authentication check for protected requests."""

    def __init__(
        self,
        token_service: TokenService,
        identity_service: IdentityService,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._token_service = token_service
        self._identity_service = identity_service
        self._clock = clock

    async def authenticate(self, authorization: str | None) -> AuthenticatedIdentity:
        token = extract_bearer_token(authorization)

        claims = self._token_service.verify_token(token)

        if not claims.is_active_at(self._clock()):
            logger.info("Rejected token outside its validity window")
            raise TokenExpiredError

        try:
            user_id = UUID(claims.user_id)
        except ValueError as e:
            msg = "Invalid user id in token claims"
            raise InvalidTokenError(msg) from e

        user = await self._identity_service.get_by_id(user_id)

        return AuthenticatedIdentity.create(user)
