"""Application commands for identity management."""

from judgehub_identity.application.commands.authenticate_user_command import (
    AuthenticateUserCommand,
)
from judgehub_identity.application.commands.change_password_command import (
    ChangePasswordCommand,
)
from judgehub_identity.application.commands.delete_user_command import (
    DeleteUserCommand,
)
from judgehub_identity.application.commands.register_user_command import (
    RegisterUserCommand,
)
from judgehub_identity.application.commands.request_password_reset_command import (
    RequestPasswordResetCommand,
)
from judgehub_identity.application.commands.reset_password_command import (
    ResetPasswordCommand,
)
from judgehub_identity.application.commands.set_language_command import (
    SetLanguageCommand,
)
from judgehub_identity.application.commands.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = [
    "AuthenticateUserCommand",
    "ChangePasswordCommand",
    "DeleteUserCommand",
    "RegisterUserCommand",
    "RequestPasswordResetCommand",
    "ResetPasswordCommand",
    "SetLanguageCommand",
    "UpdateProfileCommand",
]
