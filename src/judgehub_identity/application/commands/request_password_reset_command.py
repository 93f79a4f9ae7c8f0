import logging

from judgehub_identity.application.services import CredentialService
from judgehub_identity.domain.user import UserRepository, UserStatus

logger = logging.getLogger(__name__)


class RequestPasswordResetCommand:
    """Issue a password reset token for the account registered to an email."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_service: CredentialService,
    ):
        self._user_repo = user_repository
        self._credentials = credential_service

    async def execute(self, email: str) -> str | None:
        """Return the token to deliver, or None when no active account matches.

        A still-valid token is reused so repeated requests send the same link.
        """
        user = await self._user_repo.find_one(email=email, status=UserStatus.ACTIVE)
        if user is None:
            # Silent to prevent email enumeration
            logger.debug("Password reset requested for unknown email: %s", email)
            return None

        if self._credentials.is_password_reset_token_valid(user.password_reset_token):
            return user.password_reset_token

        token = self._credentials.generate_password_reset_token(user)
        await self._user_repo.save(user)
        logger.info("Password reset token issued for user %s", user.id)
        return token
