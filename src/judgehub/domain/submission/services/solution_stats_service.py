"""Reduce a submission history to per-user statistics."""

from collections.abc import Iterable

from judgehub.domain.submission.entities import SubmissionRecord
from judgehub.domain.submission.value_objects import SolutionStats, Verdict

# Verdicts with a dedicated counter; every other code only counts in all_count.
COUNTED_VERDICTS = (Verdict.AC, Verdict.WA, Verdict.CE, Verdict.TL)


def summarize_submissions(records: Iterable[SubmissionRecord]) -> SolutionStats:
    """Count verdicts and split attempted problems into solved and unsolved.

    A problem with at least one accepted submission is solved, whatever the
    order of its other attempts. Dicts are used as ordered sets so ids keep
    their first-seen order.
    """
    counts = dict.fromkeys(COUNTED_VERDICTS, 0)
    all_count = 0
    attempted: dict[int, None] = {}
    solved: dict[int, None] = {}

    for record in records:
        all_count += 1
        attempted.setdefault(record.problem_id)
        if record.is_accepted:
            solved.setdefault(record.problem_id)
        if record.result in counts:
            counts[record.result] += 1

    return SolutionStats(
        ac_count=counts[Verdict.AC],
        ce_count=counts[Verdict.CE],
        wa_count=counts[Verdict.WA],
        tle_count=counts[Verdict.TL],
        all_count=all_count,
        solved_problem=tuple(solved),
        unsolved_problem=tuple(p for p in attempted if p not in solved),
    )
