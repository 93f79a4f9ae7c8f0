"""Read-only view of a judged submission."""

from dataclasses import dataclass

from judgehub.domain.submission.value_objects import Verdict


@dataclass(frozen=True)
class SubmissionRecord:
    """One row of a user's submission history.

    ``result`` is the raw stored code; codes outside ``Verdict`` are kept
    as-is so they still count towards totals.
    """

    problem_id: int
    language: int
    result: int
    created_by: int

    @property
    def verdict(self) -> Verdict | None:
        return Verdict.from_code(self.result)

    @property
    def is_accepted(self) -> bool:
        return self.result == Verdict.AC
