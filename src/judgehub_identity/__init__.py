"""JudgeHub Identity - user accounts and their credentials.

This module handles all identity-related concerns:
- User accounts (username, nickname, status, role)
- Credentials (password hashing, auth keys, reset tokens)
- Login handle resolution

Submission statistics live in judgehub and only reference the user id,
keeping identity concerns separated.
"""

from judgehub_identity.application.commands import (
    AuthenticateUserCommand,
    ChangePasswordCommand,
    DeleteUserCommand,
    RegisterUserCommand,
    RequestPasswordResetCommand,
    ResetPasswordCommand,
    SetLanguageCommand,
    UpdateProfileCommand,
)
from judgehub_identity.application.services import CredentialService, IdentityService
from judgehub_identity.domain.user import (
    InvalidNicknameError,
    InvalidStatusError,
    InvalidUsernameError,
    User,
    UserNotFoundError,
    UsernameAlreadyExistsError,
    UserRepository,
    UserRole,
    UserStatus,
    is_password_reset_token_valid,
    is_valid_username,
)
from judgehub_identity.exceptions import (
    IncorrectOldPasswordError,
    InvalidCredentialsError,
    InvalidResetTokenError,
    PasswordMismatchError,
    ProfileLockedError,
    RequiredFieldError,
    WeakPasswordError,
)
from judgehub_identity.services import PasswordHashingService

__all__ = [
    # Domain - User
    "InvalidNicknameError",
    "InvalidStatusError",
    "InvalidUsernameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UserStatus",
    "UsernameAlreadyExistsError",
    "is_password_reset_token_valid",
    "is_valid_username",
    # Exceptions
    "IncorrectOldPasswordError",
    "InvalidCredentialsError",
    "InvalidResetTokenError",
    "PasswordMismatchError",
    "ProfileLockedError",
    "RequiredFieldError",
    "WeakPasswordError",
    # Services
    "PasswordHashingService",
    # Application Services
    "CredentialService",
    "IdentityService",
    # Application Commands
    "AuthenticateUserCommand",
    "ChangePasswordCommand",
    "DeleteUserCommand",
    "RegisterUserCommand",
    "RequestPasswordResetCommand",
    "ResetPasswordCommand",
    "SetLanguageCommand",
    "UpdateProfileCommand",
]
