# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for the JudgeHub core."""

from judgehub.infrastructure.persistence.sqlalchemy.repositories.submission_repository import (
    SubmissionRepositorySQLAlchemy,
)

__all__ = ["SubmissionRepositorySQLAlchemy"]
