"""SQLAlchemy persistence for the JudgeHub core."""

from judgehub.infrastructure.persistence.sqlalchemy.models import (
    Base,
    SolutionModel,
    TimestampMixin,
)
from judgehub.infrastructure.persistence.sqlalchemy.repositories import (
    SubmissionRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "SolutionModel",
    "SubmissionRepositorySQLAlchemy",
    "TimestampMixin",
]
