import logging

from judgehub_identity.application.services import CredentialService, IdentityService
from judgehub_identity.domain.user import UserRepository
from judgehub_identity.exceptions import InvalidResetTokenError

logger = logging.getLogger(__name__)


class ResetPasswordCommand:
    """Set a new password using a password reset token."""

    def __init__(
        self,
        user_repository: UserRepository,
        identity_service: IdentityService,
        credential_service: CredentialService,
    ):
        self._user_repo = user_repository
        self._identities = identity_service
        self._credentials = credential_service

    async def execute(self, token: str, new_password: str) -> None:
        user = await self._identities.find_by_password_reset_token(token)
        if user is None:
            raise InvalidResetTokenError

        self._credentials.set_password(user, new_password)
        self._credentials.remove_password_reset_token(user)
        await self._user_repo.save(user)
        logger.info("Password reset completed for user: %s", user.id)
