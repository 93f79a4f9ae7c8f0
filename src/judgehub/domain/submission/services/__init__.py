from judgehub.domain.submission.services.solution_stats_service import (
    COUNTED_VERDICTS,
    summarize_submissions,
)

__all__ = ["COUNTED_VERDICTS", "summarize_submissions"]
