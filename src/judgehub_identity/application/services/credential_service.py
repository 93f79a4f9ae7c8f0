"""Credential handling for user accounts.

Passwords, "remember me" auth keys and password reset tokens. Hashing is
delegated to the PasswordHashingService and the current time to an
injectable clock. Nothing here persists; callers save the user afterwards.
"""

import logging
import secrets
from collections.abc import Callable

from judgehub.domain.shared import FieldError, ValidationResult, unix_now
from judgehub_identity.domain.user import (
    User,
    build_password_reset_token,
    is_password_reset_token_valid,
)
from judgehub_identity.exceptions import (
    IncorrectOldPasswordError,
    PasswordMismatchError,
    RequiredFieldError,
)
from judgehub_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)

AUTH_KEY_LENGTH = 32
RESET_TOKEN_RANDOM_LENGTH = 32


class CredentialService:
    """Set, verify and rotate the credential material held by a user."""

    def __init__(
        self,
        password_service: PasswordHashingService,
        password_reset_token_expire_seconds: int = 3600,
        clock: Callable[[], int] = unix_now,
    ):
        self._password_service = password_service
        self._expire_seconds = password_reset_token_expire_seconds
        self._clock = clock

    @property
    def password_reset_token_expire_seconds(self) -> int:
        return self._expire_seconds

    def verify_password(self, user: User, password: str) -> bool:
        return self._password_service.verify(password, user.password_hash)

    def set_password(self, user: User, password: str) -> None:
        """Replace the user's password hash.

        Raises
        ------
        WeakPasswordError
            If the password cannot be hashed; the user is left unchanged
        """
        user.change_password_hash(self._password_service.hash(password))

    def needs_rehash(self, user: User) -> bool:
        return self._password_service.needs_rehash(user.password_hash)

    def generate_auth_key(self, user: User) -> str:
        auth_key = self._password_service.generate_random_string(AUTH_KEY_LENGTH)
        user.assign_auth_key(auth_key)
        return auth_key

    def validate_auth_key(self, user: User, auth_key: str) -> bool:
        if not auth_key or not user.auth_key:
            return False
        return secrets.compare_digest(user.auth_key, auth_key)

    def generate_password_reset_token(self, user: User) -> str:
        token = build_password_reset_token(
            self._password_service.generate_random_string(RESET_TOKEN_RANDOM_LENGTH),
            self._clock(),
        )
        user.assign_password_reset_token(token)
        return token

    def remove_password_reset_token(self, user: User) -> None:
        user.assign_password_reset_token(None)

    def is_password_reset_token_valid(self, token: str | None) -> bool:
        return is_password_reset_token_valid(token, self._expire_seconds, self._clock())

    def validate_password_change(
        self,
        user: User,
        old_password: str,
        new_password: str,
        verify_password: str,
    ) -> ValidationResult:
        """Check a change-password form without touching the user.

        Every field is required. The old password must verify against the
        stored hash and the repeated password must equal the new one. All
        failing fields are reported together.
        """
        errors: list[FieldError] = []
        fields = {
            "old_password": old_password,
            "new_password": new_password,
            "verify_password": verify_password,
        }
        for name, value in fields.items():
            if not value:
                errors.append(FieldError(name, RequiredFieldError(name)))

        if old_password and not self.verify_password(user, old_password):
            logger.debug("Old password did not verify for user %s", user.id)
            errors.append(FieldError("old_password", IncorrectOldPasswordError()))

        if new_password and verify_password and new_password != verify_password:
            errors.append(FieldError("verify_password", PasswordMismatchError()))

        return ValidationResult(tuple(errors))
