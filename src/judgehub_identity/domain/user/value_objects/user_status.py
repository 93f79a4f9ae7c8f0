from enum import IntEnum

from judgehub_identity.domain.user.exceptions import InvalidStatusError


class UserStatus(IntEnum):
    """Account status. Deleted accounts are kept, never removed."""

    DELETED = 0
    ACTIVE = 10

    @classmethod
    def parse(cls, value: "int | UserStatus") -> "UserStatus":
        if isinstance(value, bool):
            raise InvalidStatusError(value)
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidStatusError(value) from e
