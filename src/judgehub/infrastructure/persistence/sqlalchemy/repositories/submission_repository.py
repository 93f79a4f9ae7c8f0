"""SQLAlchemy implementation of SubmissionRepository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from judgehub.domain.submission import SubmissionRecord, SubmissionRepository
from judgehub.infrastructure.persistence.sqlalchemy.models import SolutionModel


class SubmissionRepositorySQLAlchemy(SubmissionRepository):
    """Reads only the columns the statistics need, never whole rows."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user(self, user_id: int) -> list[SubmissionRecord]:
        stmt = (
            select(
                SolutionModel.problem_id,
                SolutionModel.language,
                SolutionModel.result,
                SolutionModel.created_by,
            )
            .where(SolutionModel.created_by == user_id)
            .order_by(SolutionModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            SubmissionRecord(
                problem_id=row.problem_id,
                language=row.language,
                result=row.result,
                created_by=row.created_by,
            )
            for row in result
        ]
