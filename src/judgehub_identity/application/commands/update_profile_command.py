import logging

from judgehub_identity.domain.user import (
    Nickname,
    User,
    UserNotFoundError,
    Username,
    UsernameAlreadyExistsError,
    UserRepository,
    UserStatus,
)
from judgehub_identity.exceptions import ProfileLockedError

logger = logging.getLogger(__name__)


class UpdateProfileCommand:
    """Update the editable account fields of an active user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(
        self,
        user_id: int,
        nickname: str | None = None,
        username: str | None = None,
        email: str | None = None,
    ) -> User:
        if nickname is None and username is None and email is None:
            msg = "At least one field must be specified for update"
            raise ValueError(msg)

        user = await self._user_repo.find_one(id=user_id, status=UserStatus.ACTIVE)
        if user is None:
            raise UserNotFoundError(user_id)
        if user.is_player:
            raise ProfileLockedError(user_id)

        # Validate everything before mutating the user
        new_nickname = Nickname(nickname) if nickname is not None else None
        new_username = Username(username) if username is not None else None
        if new_username is not None and await self._user_repo.exists_by_username(
            new_username.value,
            exclude_id=user_id,
        ):
            raise UsernameAlreadyExistsError(new_username.value)

        if new_nickname is not None:
            user.change_nickname(new_nickname)
        if new_username is not None:
            user.rename(new_username)
        if email is not None:
            user.change_email(email or None)

        await self._user_repo.save(user)
        logger.info("Updated profile for user %s", user_id)
        return user
