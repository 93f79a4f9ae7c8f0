"""User repository interfaces."""

from judgehub_identity.domain.user.repositories.user_repository import (
    LOOKUP_FIELDS,
    UserRepository,
)

__all__ = ["LOOKUP_FIELDS", "UserRepository"]
