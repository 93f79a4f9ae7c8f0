"""Identity and credential exceptions.

These exceptions are raised by the judgehub_identity package and should be
caught and handled by the application layer. They extend the shared domain
categories so callers can handle them alongside every other domain error.
"""

from judgehub.domain.shared.exceptions import (
    CredentialError,
    ErrorCode,
    ValidationError,
)


class InvalidCredentialsError(CredentialError):
    """Raised when the login handle or password is incorrect."""

    def __init__(self, message: str = "Incorrect username or password."):
        super().__init__(message, code=ErrorCode.INVALID_CREDENTIALS)


class IncorrectOldPasswordError(CredentialError):
    """Raised when the current password given for a change does not verify."""

    def __init__(self, message: str = "Incorrect old password."):
        super().__init__(message, code=ErrorCode.INCORRECT_OLD_PASSWORD)


class InvalidResetTokenError(CredentialError):
    """Raised when a password reset token is invalid or expired."""

    def __init__(self, message: str = "Invalid or expired password reset token"):
        super().__init__(message, code=ErrorCode.INVALID_RESET_TOKEN)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, code=ErrorCode.WEAK_PASSWORD)


class RequiredFieldError(ValidationError):
    """Raised when a required form field is empty."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        label = field_name.replace("_", " ").capitalize()
        super().__init__(
            f"{label} cannot be blank.",
            code=ErrorCode.REQUIRED_FIELD,
            details={"field": field_name},
        )


class PasswordMismatchError(ValidationError):
    """Raised when the repeated new password differs from the new password."""

    def __init__(self, message: str = "The new passwords do not match."):
        super().__init__(message, code=ErrorCode.PASSWORD_MISMATCH)


class ProfileLockedError(ValidationError):
    """Raised when a contest (player) account tries to edit its own profile."""

    def __init__(self, user_id: object):
        self.user_id = user_id
        super().__init__(
            "Contest accounts cannot change their profile or password.",
            code=ErrorCode.PROFILE_LOCKED,
            details={"user_id": user_id},
        )
