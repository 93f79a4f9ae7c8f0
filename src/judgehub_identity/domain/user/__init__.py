"""User domain manages account identity and credential material.

This domain handles:
- User aggregate (username, nickname, status, role, credentials)
- Username and nickname rules
- Password reset token format and expiry

Submission statistics are handled by judgehub.domain.submission.
"""

from judgehub_identity.domain.user.aggregates import User
from judgehub_identity.domain.user.exceptions import (
    USERNAME_RULE_MESSAGE,
    InvalidNicknameError,
    InvalidStatusError,
    InvalidUsernameError,
    UserNotFoundError,
    UsernameAlreadyExistsError,
)
from judgehub_identity.domain.user.repositories import LOOKUP_FIELDS, UserRepository
from judgehub_identity.domain.user.value_objects import (
    Nickname,
    UserRole,
    UserStatus,
    Username,
    build_password_reset_token,
    is_password_reset_token_valid,
    is_valid_username,
    parse_issued_at,
)

__all__ = [
    "LOOKUP_FIELDS",
    "USERNAME_RULE_MESSAGE",
    "InvalidNicknameError",
    "InvalidStatusError",
    "InvalidUsernameError",
    "Nickname",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UserStatus",
    "Username",
    "UsernameAlreadyExistsError",
    "build_password_reset_token",
    "is_password_reset_token_valid",
    "is_valid_username",
    "parse_issued_at",
]
