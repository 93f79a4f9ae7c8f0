import logging

from judgehub_identity.application.services import CredentialService
from judgehub_identity.domain.user import (
    User,
    UsernameAlreadyExistsError,
    UserRepository,
    UserRole,
)

logger = logging.getLogger(__name__)


class RegisterUserCommand:
    """Command to register a new account."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_service: CredentialService,
    ):
        self._user_repo = user_repository
        self._credentials = credential_service

    async def execute(  # noqa: PLR0913
        self,
        username: str,
        nickname: str,
        password: str,
        email: str | None = None,
        role: UserRole = UserRole.USER,
        language: int = 0,
    ) -> User:
        user = User.create(
            username,
            nickname,
            email=email,
            role=role,
            language=language,
        )
        if await self._user_repo.exists_by_username(user.username):
            raise UsernameAlreadyExistsError(user.username)

        self._credentials.set_password(user, password)
        self._credentials.generate_auth_key(user)

        await self._user_repo.save(user)
        logger.info("Registered user %s (id: %s)", user.username, user.id)
        return user
