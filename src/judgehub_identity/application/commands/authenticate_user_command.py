import logging

from judgehub_identity.application.services import CredentialService, IdentityService
from judgehub_identity.domain.user import User, UserRepository
from judgehub_identity.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthenticateUserCommand:
    """Check a login handle and password, returning the active user."""

    def __init__(
        self,
        user_repository: UserRepository,
        identity_service: IdentityService,
        credential_service: CredentialService,
    ):
        self._user_repo = user_repository
        self._identities = identity_service
        self._credentials = credential_service

    async def execute(self, handle: str, password: str) -> User:
        user = await self._identities.find_by_login_handle(handle)
        if user is None or not self._credentials.verify_password(user, password):
            logger.info("Failed login attempt for handle %r", handle)
            raise InvalidCredentialsError

        if self._credentials.needs_rehash(user):
            self._credentials.set_password(user, password)
            await self._user_repo.save(user)
            logger.info("Rehashed password for user %s", user.id)

        return user
