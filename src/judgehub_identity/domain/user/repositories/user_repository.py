"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from judgehub_identity.domain.user.aggregates.user import User

LOOKUP_FIELDS = frozenset(
    {"id", "username", "email", "status", "auth_key", "password_reset_token"}
)


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_one(self, **criteria: Any) -> Optional[User]:
        """Find the first user matching every criterion by equality.

        Criteria keys are limited to ``LOOKUP_FIELDS``; an unknown key
        raises ``ValueError``.
        """

    @abstractmethod
    async def exists_by_username(
        self,
        username: str,
        exclude_id: Optional[int] = None,
    ) -> bool:
        """Check if another user already holds the given username."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update a user. Assigns the id on first save."""

    @abstractmethod
    async def update_fields(self, user_id: int, **fields: Any) -> int:
        """Write raw column values for one user, returning the affected row count."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
