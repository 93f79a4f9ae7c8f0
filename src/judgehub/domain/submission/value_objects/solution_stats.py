"""Aggregated submission statistics for one user."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolutionStats:
    """Verdict counters plus solved and unsolved problem ids.

    Problem id tuples keep first-seen submission order.
    """

    ac_count: int = 0
    ce_count: int = 0
    wa_count: int = 0
    tle_count: int = 0
    all_count: int = 0
    solved_problem: tuple[int, ...] = ()
    unsolved_problem: tuple[int, ...] = ()

    @property
    def solved_count(self) -> int:
        return len(self.solved_problem)

    def to_dict(self) -> dict:
        return {
            "ac_count": self.ac_count,
            "ce_count": self.ce_count,
            "wa_count": self.wa_count,
            "tle_count": self.tle_count,
            "all_count": self.all_count,
            "solved_problem": list(self.solved_problem),
            "unsolved_problem": list(self.unsolved_problem),
        }
