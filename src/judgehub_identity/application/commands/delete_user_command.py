import logging

from judgehub_identity.domain.user import UserNotFoundError, UserRepository, UserStatus

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to soft-delete a user. The row is kept with status DELETED."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: int) -> None:
        user = await self._user_repo.find_one(id=user_id, status=UserStatus.ACTIVE)
        if user is None:
            raise UserNotFoundError(user_id)

        user.soft_delete()
        await self._user_repo.save(user)
        logger.info("Soft-deleted user %s", user_id)
