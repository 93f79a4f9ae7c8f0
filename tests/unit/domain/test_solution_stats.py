"""Unit tests for the submission statistics reducer."""

import pytest

from judgehub.domain.submission import (
    SolutionStats,
    SubmissionRecord,
    Verdict,
    summarize_submissions,
)


def _records(*pairs: tuple[int, int]) -> list[SubmissionRecord]:
    return [
        SubmissionRecord(problem_id=problem_id, language=1, result=result, created_by=1)
        for problem_id, result in pairs
    ]


class TestVerdict:
    """Tests for verdict codes."""

    def test_codes(self):
        assert Verdict.AC == 4
        assert Verdict.WA == 6
        assert Verdict.TL == 7
        assert Verdict.CE == 11

    def test_from_code_unknown(self):
        assert Verdict.from_code(99) is None
        assert Verdict.from_code(4) is Verdict.AC

    def test_record_verdict(self):
        record = _records((1, 4))[0]

        assert record.verdict is Verdict.AC
        assert record.is_accepted is True


class TestSummarizeSubmissions:
    """Tests for summarize_submissions."""

    def test_mixed_history(self):
        stats = summarize_submissions(
            _records(
                (1, Verdict.AC),
                (1, Verdict.WA),
                (2, Verdict.WA),
                (3, Verdict.CE),
            )
        )

        assert stats.ac_count == 1
        assert stats.wa_count == 2
        assert stats.ce_count == 1
        assert stats.tle_count == 0
        assert stats.all_count == 4
        assert stats.solved_problem == (1,)
        assert stats.unsolved_problem == (2, 3)

    def test_no_submissions(self):
        stats = summarize_submissions([])

        assert stats == SolutionStats()
        assert stats.to_dict() == {
            "ac_count": 0,
            "ce_count": 0,
            "wa_count": 0,
            "tle_count": 0,
            "all_count": 0,
            "solved_problem": [],
            "unsolved_problem": [],
        }

    def test_solved_after_failures_only_in_solved(self):
        stats = summarize_submissions(
            _records((5, Verdict.WA), (5, Verdict.TL), (5, Verdict.AC))
        )

        assert stats.solved_problem == (5,)
        assert stats.unsolved_problem == ()
        assert stats.tle_count == 1

    @pytest.mark.parametrize(
        "result",
        [Verdict.WT0, Verdict.RE, Verdict.ML, Verdict.PE, Verdict.SE, 99],
    )
    def test_other_verdicts_only_count_in_total(self, result):
        stats = summarize_submissions(_records((8, result)))

        assert stats.all_count == 1
        assert stats.ac_count == stats.wa_count == stats.ce_count == 0
        assert stats.tle_count == 0
        assert stats.unsolved_problem == (8,)

    def test_problem_ids_deduplicated_in_first_seen_order(self):
        stats = summarize_submissions(
            _records(
                (30, Verdict.WA),
                (10, Verdict.AC),
                (20, Verdict.CE),
                (30, Verdict.WA),
                (10, Verdict.AC),
                (40, Verdict.AC),
            )
        )

        assert stats.solved_problem == (10, 40)
        assert stats.unsolved_problem == (30, 20)
        assert stats.ac_count == 3
        assert stats.solved_count == 2

    def test_accepts_any_iterable(self):
        stats = summarize_submissions(iter(_records((1, Verdict.AC))))

        assert stats.all_count == 1
