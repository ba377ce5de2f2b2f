"""Discipline Identity - users, credentials and request authentication.

This package handles all identity-related concerns:
- User management (registration, lookup, password change, deletion)
- Credential validation and password hashing (bcrypt)
- Token issuance and verification (JWT)
- The request authentication gate that yields AuthenticatedIdentity

The habit domain only references user IDs, keeping identity concerns
separated.
"""

from discipline_identity.application.context import AuthenticatedIdentity
from discipline_identity.application.services import (
    IdentityService,
    RequestAuthenticationGate,
)
from discipline_identity.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)
from discipline_identity.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
    WrongCredentialsError,
)
from discipline_identity.schemas import TokenClaims
from discipline_identity.services import (
    CredentialValidator,
    PasswordHashingService,
    TokenService,
)

__all__ = [
    # Domain - User
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
    # Exceptions
    "InvalidTokenError",
    "TokenExpiredError",
    "WrongCredentialsError",
    # Schemas
    "TokenClaims",
    # Services
    "CredentialValidator",
    "PasswordHashingService",
    "TokenService",
    # Application Context
    "AuthenticatedIdentity",
    # Application Services
    "IdentityService",
    "RequestAuthenticationGate",
]
