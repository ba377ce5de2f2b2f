from discipline_identity.application.context.authenticated_identity import (
    AuthenticatedIdentity,
)

__all__ = ["AuthenticatedIdentity"]
