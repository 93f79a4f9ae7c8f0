"""Application services for identity management."""

from judgehub_identity.application.services.credential_service import (
    CredentialService,
)
from judgehub_identity.application.services.identity_service import IdentityService

__all__ = ["CredentialService", "IdentityService"]
