from judgehub.domain.submission.entities.submission_record import SubmissionRecord

__all__ = ["SubmissionRecord"]
