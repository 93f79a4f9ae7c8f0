"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from judgehub.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)

USERNAME_RULE_MESSAGE = (
    "Username may only contain letters, digits and underscores, must not be "
    "purely numeric, and must be 4-32 characters long."
)


class InvalidUsernameError(ValidationError):
    """Raised when a username does not match the username rule."""

    def __init__(self, username: str, message: str = USERNAME_RULE_MESSAGE) -> None:
        self.username = username
        super().__init__(
            message,
            code=ErrorCode.INVALID_USERNAME,
            details={"username": username},
        )


class InvalidNicknameError(ValidationError):
    """Raised when a nickname is missing or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_NICKNAME)


class InvalidStatusError(ValidationError):
    """Raised when a status code is not one of the defined values."""

    def __init__(self, status: object) -> None:
        self.status = status
        super().__init__(
            f"Invalid user status: {status!r}",
            code=ErrorCode.INVALID_STATUS,
        )


class UsernameAlreadyExistsError(ConflictError):
    """Username already registered."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            "This username has already been taken.",
            code=ErrorCode.USERNAME_TAKEN,
            details={"username": username},
        )


class UserNotFoundError(NotFoundError):
    """User not found (or not active)."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
        )
