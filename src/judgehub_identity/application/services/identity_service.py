"""Resolve users into identities.

Only ACTIVE accounts resolve; deleted ones behave as if they did not exist.
"""

import logging

from judgehub_identity.application.services.credential_service import (
    CredentialService,
)
from judgehub_identity.domain.user import User, UserRepository, UserStatus

logger = logging.getLogger(__name__)


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


class IdentityService:
    """Lookups used by login, "remember me" and password reset flows."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_service: CredentialService,
    ):
        self._user_repo = user_repository
        self._credentials = credential_service

    async def find_active_by_id(self, user_id: int) -> User | None:
        return await self._user_repo.find_one(id=user_id, status=UserStatus.ACTIVE)

    async def find_by_login_handle(self, handle: str) -> User | None:
        """Find an active user by id, email or username.

        A handle made only of digits is an id, a handle containing ``@`` is
        an email, anything else is a username.
        """
        if not handle:
            return None
        if _is_ascii_digits(handle):
            logger.debug("Resolving login handle as id")
            return await self.find_active_by_id(int(handle))
        if "@" in handle:
            logger.debug("Resolving login handle as email")
            return await self._user_repo.find_one(
                email=handle,
                status=UserStatus.ACTIVE,
            )
        logger.debug("Resolving login handle as username")
        return await self._user_repo.find_one(
            username=handle,
            status=UserStatus.ACTIVE,
        )

    async def find_by_password_reset_token(self, token: str | None) -> User | None:
        if not self._credentials.is_password_reset_token_valid(token):
            return None
        return await self._user_repo.find_one(
            password_reset_token=token,
            status=UserStatus.ACTIVE,
        )

    async def find_by_auth_key(self, auth_key: str) -> User | None:
        if not auth_key:
            return None
        return await self._user_repo.find_one(
            auth_key=auth_key,
            status=UserStatus.ACTIVE,
        )

    async def find_identity_by_access_token(self, token: str) -> User | None:
        """Unsupported: accounts authenticate by password or auth key only."""
        msg = "Access token authentication is not supported"
        raise NotImplementedError(msg)
