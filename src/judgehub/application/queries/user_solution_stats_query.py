"""Query the submission statistics shown on a user's profile."""

from __future__ import annotations

import logging

from judgehub.domain.submission import (
    SolutionStats,
    SubmissionRepository,
    summarize_submissions,
)

logger = logging.getLogger(__name__)


class UserSolutionStatsQuery:
    """Compute verdict counts and solved/unsolved problems for a user."""

    def __init__(self, submission_repository: SubmissionRepository):
        self._submission_repo = submission_repository

    async def execute(self, user_id: int) -> SolutionStats:
        records = await self._submission_repo.find_by_user(user_id)
        stats = summarize_submissions(records)
        logger.debug(
            "Computed solution stats for user %s: %d submissions, %d solved",
            user_id,
            stats.all_count,
            stats.solved_count,
        )
        return stats
