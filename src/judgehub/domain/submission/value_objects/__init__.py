"""Value objects for the submission domain."""

from judgehub.domain.submission.value_objects.solution_stats import SolutionStats
from judgehub.domain.submission.value_objects.verdict import Verdict

__all__ = [
    "SolutionStats",
    "Verdict",
]
