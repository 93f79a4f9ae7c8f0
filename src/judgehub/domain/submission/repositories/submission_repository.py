"""Submission repository interface."""

from abc import ABC, abstractmethod

from judgehub.domain.submission.entities import SubmissionRecord


class SubmissionRepository(ABC):
    """Read-only access to judged submissions."""

    @abstractmethod
    async def find_by_user(self, user_id: int) -> list[SubmissionRecord]:
        """Return the full submission history of a user (no pagination)."""
