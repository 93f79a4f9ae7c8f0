"""Submission domain.

Read-only view of judged submissions and the statistics derived from a
user's history. Submissions reference users by id only.
"""

from judgehub.domain.submission.entities import SubmissionRecord
from judgehub.domain.submission.repositories import SubmissionRepository
from judgehub.domain.submission.services import summarize_submissions
from judgehub.domain.submission.value_objects import SolutionStats, Verdict

__all__ = [
    "SolutionStats",
    "SubmissionRecord",
    "SubmissionRepository",
    "Verdict",
    "summarize_submissions",
]
