"""Username value object.

Letters, digits and underscores only, 4-32 characters, not purely numeric,
no leading or trailing underscore. Matching is case-insensitive and the
original casing is kept.
"""

import re
from dataclasses import dataclass

from judgehub_identity.domain.user.exceptions import InvalidUsernameError

MIN_LENGTH = 4
MAX_LENGTH = 32

USERNAME_PATTERN = re.compile(
    r"(?!_)(?!.*_\Z)(?![0-9]+\Z)[a-z0-9_]{4,32}",
    re.IGNORECASE | re.ASCII,
)


def is_valid_username(value: str) -> bool:
    return isinstance(value, str) and USERNAME_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class Username:
    """Value object representing a validated username."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_username(self.value):
            raise InvalidUsernameError(self.value)

    def __str__(self) -> str:
        return self.value
