import logging

from judgehub_identity.domain.user import UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class SetLanguageCommand:
    """Store a user's preferred submission language code."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: int, language: int) -> None:
        if isinstance(language, bool) or not isinstance(language, int):
            msg = f"Language must be an integer code, got {language!r}"
            raise TypeError(msg)

        updated = await self._user_repo.update_fields(user_id, language=language)
        if not updated:
            raise UserNotFoundError(user_id)
        logger.debug("Set language %s for user %s", language, user_id)
