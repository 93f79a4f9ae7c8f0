"""Value objects for the user domain."""

from judgehub_identity.domain.user.value_objects.nickname import Nickname
from judgehub_identity.domain.user.value_objects.password_reset_token import (
    build_password_reset_token,
    is_password_reset_token_valid,
    parse_issued_at,
)
from judgehub_identity.domain.user.value_objects.user_role import UserRole
from judgehub_identity.domain.user.value_objects.user_status import UserStatus
from judgehub_identity.domain.user.value_objects.username import (
    Username,
    is_valid_username,
)

__all__ = [
    "Nickname",
    "UserRole",
    "UserStatus",
    "Username",
    "build_password_reset_token",
    "is_password_reset_token_valid",
    "is_valid_username",
    "parse_issued_at",
]
