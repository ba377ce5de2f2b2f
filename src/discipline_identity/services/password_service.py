"""bcrypt password hashing.

Only hashing and verification live here; length and character rules are
checked beforehand by CredentialValidator.
"""

import bcrypt


class PasswordHashingService:
    """Salted bcrypt hashes with a configurable cost factor.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> stored = hasher.hash("correct horse")
    >>> hasher.verify("correct horse", stored), hasher.verify("wrong", stored)
    (True, False)
    """

    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor (log2 of the key-expansion iterations). Tests
            use 4 to stay fast; production keeps the default.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the ``$2b$...`` hash string for ``password``."""
        digest = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash in constant time.

        A malformed stored hash, or a password bcrypt refuses to process,
        counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False
