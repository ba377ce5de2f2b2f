"""Authentication exceptions.

These exceptions are raised by the discipline_identity package and are
mapped to HTTP responses by the API's exception handlers.
"""

from discipline.domain.shared.exceptions import AuthenticationError, ErrorCode


class WrongCredentialsError(AuthenticationError):
    """Raised when the password does not match the stored digest."""

    def __init__(self, message: str = "Wrong name or password"):
        super().__init__(message, code=ErrorCode.WRONG_CREDENTIALS)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is missing, malformed or badly signed."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code=ErrorCode.INVALID_TOKEN)


class TokenExpiredError(AuthenticationError):
    """Raised when a token is outside its not-before/expiry window."""

    def __init__(self, message: str = "Token expired or not yet valid"):
        super().__init__(message, code=ErrorCode.TOKEN_EXPIRED)
