"""SQLAlchemy models for identity persistence."""

from judgehub_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["UserModel"]
