"""SQLAlchemy persistence for identity."""

from judgehub_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from judgehub_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = ["UserModel", "UserRepositorySQLAlchemy"]
