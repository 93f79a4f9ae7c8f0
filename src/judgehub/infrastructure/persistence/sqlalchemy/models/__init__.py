"""SQLAlchemy models of the JudgeHub core."""

from judgehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from judgehub.infrastructure.persistence.sqlalchemy.models.submission_model import (
    SolutionModel,
)

__all__ = [
    "Base",
    "SolutionModel",
    "TimestampMixin",
]
