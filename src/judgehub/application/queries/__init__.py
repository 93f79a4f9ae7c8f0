"""Read-side queries of the JudgeHub core."""

from judgehub.application.queries.user_solution_stats_query import (
    UserSolutionStatsQuery,
)

__all__ = ["UserSolutionStatsQuery"]
