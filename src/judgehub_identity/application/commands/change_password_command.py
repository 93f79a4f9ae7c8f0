import logging

from judgehub_identity.application.services import CredentialService
from judgehub_identity.domain.user import UserNotFoundError, UserRepository, UserStatus
from judgehub_identity.exceptions import ProfileLockedError

logger = logging.getLogger(__name__)


class ChangePasswordCommand:
    """Change a password after confirming the current one."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_service: CredentialService,
    ):
        self._user_repo = user_repository
        self._credentials = credential_service

    async def execute(
        self,
        user_id: int,
        old_password: str,
        new_password: str,
        verify_password: str,
    ) -> None:
        user = await self._user_repo.find_one(id=user_id, status=UserStatus.ACTIVE)
        if user is None:
            raise UserNotFoundError(user_id)
        if user.is_player:
            raise ProfileLockedError(user_id)

        result = self._credentials.validate_password_change(
            user,
            old_password,
            new_password,
            verify_password,
        )
        result.raise_for_errors()

        self._credentials.set_password(user, new_password)
        await self._user_repo.save(user)
        logger.info("Password changed for user %s", user_id)
