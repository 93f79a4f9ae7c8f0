"""SQLAlchemy model for User aggregate."""

from sqlalchemy import Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from judgehub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(32),
        unique=True,
        nullable=False,
        index=True,
    )
    nickname: Mapped[str] = mapped_column(String(16), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    auth_key: Mapped[str] = mapped_column(String(32), nullable=False)
    password_reset_token: Mapped[str | None] = mapped_column(
        String(255),
        unique=True,
        nullable=True,
    )
    status: Mapped[int] = mapped_column(SmallInteger, default=10, nullable=False)
    role: Mapped[int] = mapped_column(SmallInteger, default=10, nullable=False)
    language: Mapped[int] = mapped_column(SmallInteger, default=0, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<UserModel(id={self.id}, username={self.username}, "
            f"status={self.status})>"
        )
