from dataclasses import dataclass

from judgehub_identity.domain.user.exceptions import InvalidNicknameError

MAX_LENGTH = 16


@dataclass(frozen=True)
class Nickname:
    """Display name shown next to submissions. Required, at most 16 chars."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            msg = "Nickname cannot be blank."
            raise InvalidNicknameError(msg)
        if len(self.value) > MAX_LENGTH:
            msg = f"Nickname should contain at most {MAX_LENGTH} characters."
            raise InvalidNicknameError(msg)

    def __str__(self) -> str:
        return self.value
