from judgehub.domain.submission.repositories.submission_repository import (
    SubmissionRepository,
)

__all__ = ["SubmissionRepository"]
