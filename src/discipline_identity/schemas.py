"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Decoded and signature-verified token claims.

    Attributes
    ----------
    user_id
        The user's identifier exactly as embedded (``sub`` claim); parsing
        it is left to the caller
    username
        The user's login name at issue time
    issued_at
        When the token was issued
    not_before
        Start of the validity window (inclusive)
    expires_at
        End of the validity window (exclusive)
    """

    user_id: str
    username: str
    issued_at: datetime
    not_before: datetime
    expires_at: datetime

    def is_active_at(self, moment: datetime) -> bool:
        """Check whether ``moment`` falls inside [not_before, expires_at)."""
        return self.not_before <= moment < self.expires_at
