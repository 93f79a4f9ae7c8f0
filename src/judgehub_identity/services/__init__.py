"""Identity infrastructure services."""

from judgehub_identity.services.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]
