from enum import IntEnum


class UserRole(IntEnum):
    """User roles, ordered by privilege.

    PLAYER accounts exist only to take part in a contest and may not edit
    their own username, nickname or password.
    """

    PLAYER = 0
    USER = 10
    MODERATOR = 20
    ADMIN = 30
