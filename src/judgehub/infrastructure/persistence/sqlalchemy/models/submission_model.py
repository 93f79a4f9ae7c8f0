"""SQLAlchemy model for judged submissions."""

from sqlalchemy import Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from judgehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class SolutionModel(Base, TimestampMixin):
    """One row of the judge's solution table.

    Rows are written by the judge; this package only reads them.
    """

    __tablename__ = "solution"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    problem_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_by: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    language: Mapped[int] = mapped_column(SmallInteger, default=0, nullable=False)
    result: Mapped[int] = mapped_column(SmallInteger, default=0, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<SolutionModel(id={self.id}, problem_id={self.problem_id}, "
            f"created_by={self.created_by}, result={self.result})>"
        )
