from discipline_identity.application.services.authentication_gate import (
    RequestAuthenticationGate,
    extract_bearer_token,
)
from discipline_identity.application.services.identity_service import (
    IdentityService,
)

__all__ = [
    "IdentityService",
    "RequestAuthenticationGate",
    "extract_bearer_token",
]
