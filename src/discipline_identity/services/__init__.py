from discipline_identity.services.credential_validator import CredentialValidator
from discipline_identity.services.password_service import PasswordHashingService
from discipline_identity.services.token_service import TokenService

__all__ = ["CredentialValidator", "PasswordHashingService", "TokenService"]
