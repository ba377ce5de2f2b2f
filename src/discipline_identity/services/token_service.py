"""JWT token service.

Issues and verifies signed identity tokens. Verification proves
authenticity only; whether the token is inside its validity window is
decided by RequestAuthenticationGate against its own clock.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt

from discipline.domain.shared.time import utc_now
from discipline_identity.domain.user import User
from discipline_identity.exceptions import InvalidTokenError
from discipline_identity.schemas import TokenClaims

REQUIRED_CLAIMS = ["sub", "username", "iat", "nbf", "exp"]


class TokenService:
    """Service for token creation and verification.

    Tokens are HS256-signed JWTs carrying the user's ID and name plus an
    issued-at / not-before / expires-at window.

    Examples
    --------
    >>> service = TokenService(secret_key="your-secret-key")
    >>> token = service.issue_token(user)
    >>> claims = service.verify_token(token)
    >>> print(claims.user_id)
    """

    DEFAULT_TOKEN_TTL = timedelta(hours=1)
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the token service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        token_ttl
            Lifetime of issued tokens (default 1 hour)
        clock
            Source of the current time, used for the issue timestamps
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._token_ttl = token_ttl
        self._clock = clock

    @property
    def token_ttl(self) -> timedelta:
        return self._token_ttl

    def issue_token(self, user: User) -> str:
        """Create a signed token for the user.

        Returns
        -------
        The encoded JWT token string
        """
        now = self._clock()
        payload = {
            "sub": str(user.id),
            "username": user.name,
            "iat": now,
            "nbf": now,
            "exp": now + self._token_ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenClaims:
        """Verify the signature and decode the claims.

        Expiry and not-before are deliberately not checked here.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenClaims containing the decoded data

        Raises
        ------
        InvalidTokenError
            If the signature or algorithm is wrong or the payload is malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={
                    "require": REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_nbf": False,
                    "verify_iat": False,
                },
            )

            return TokenClaims(
                user_id=str(payload["sub"]),
                username=str(payload["username"]),
                issued_at=_from_timestamp(payload["iat"]),
                not_before=_from_timestamp(payload["nbf"]),
                expires_at=_from_timestamp(payload["exp"]),
            )

        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e


def _from_timestamp(value: int | float) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)
