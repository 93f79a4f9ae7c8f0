"""User aggregate for identity concerns only."""

from __future__ import annotations

from datetime import datetime
from typing import Union

from judgehub_identity.domain.user.value_objects import (
    Nickname,
    UserRole,
    UserStatus,
    Username,
)


class User:
    """
    User aggregate root.

    Holds the account identity and its credential material (password hash,
    auth key, reset token). Hashing and token generation happen in the
    application layer; the aggregate only stores the results. The id and
    timestamps are assigned by persistence.
    """

    def __init__(  # noqa: PLR0913
        self,
        username: Union[str, Username],
        nickname: Union[str, Nickname],
        email: str | None = None,
        password_hash: str = "",
        auth_key: str = "",
        password_reset_token: str | None = None,
        status: Union[int, UserStatus] = UserStatus.ACTIVE,
        role: Union[int, UserRole] = UserRole.USER,
        language: int = 0,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._username = _as_username(username)
        self._nickname = _as_nickname(nickname)
        self._email = email
        self._password_hash = password_hash
        self._auth_key = auth_key
        self._password_reset_token = password_reset_token
        self._status = UserStatus.parse(status)
        self._role = UserRole(role)
        self._language = _validate_language(language)
        self._id = id
        self._created_at = created_at
        self._updated_at = updated_at

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def username(self) -> str:
        return self._username.value

    @property
    def nickname(self) -> str:
        return self._nickname.value

    @property
    def email(self) -> str | None:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def auth_key(self) -> str:
        return self._auth_key

    @property
    def password_reset_token(self) -> str | None:
        return self._password_reset_token

    @property
    def status(self) -> UserStatus:
        return self._status

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def language(self) -> int:
        return self._language

    @property
    def created_at(self) -> datetime | None:
        return self._created_at

    @property
    def updated_at(self) -> datetime | None:
        return self._updated_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def is_active(self) -> bool:
        return self._status == UserStatus.ACTIVE

    @property
    def is_player(self) -> bool:
        return self._role == UserRole.PLAYER

    @property
    def is_moderator(self) -> bool:
        return self._role == UserRole.MODERATOR

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    def rename(self, username: Union[str, Username]) -> None:
        self._username = _as_username(username)

    def change_nickname(self, nickname: Union[str, Nickname]) -> None:
        self._nickname = _as_nickname(nickname)

    def change_email(self, email: str | None) -> None:
        self._email = email

    def change_language(self, language: int) -> None:
        self._language = _validate_language(language)

    def change_role(self, role: Union[int, UserRole]) -> None:
        self._role = UserRole(role)

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash

    def assign_auth_key(self, auth_key: str) -> None:
        self._auth_key = auth_key

    def assign_password_reset_token(self, token: str | None) -> None:
        self._password_reset_token = token

    def soft_delete(self) -> None:
        self._status = UserStatus.DELETED

    def mark_persisted(
        self,
        id: int,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> None:
        """Record the identity and timestamps assigned by persistence."""
        self._id = id
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        username: Union[str, Username],
        nickname: Union[str, Nickname],
        email: str | None = None,
        role: UserRole = UserRole.USER,
        language: int = 0,
    ) -> User:
        return cls(
            username=username,
            nickname=nickname,
            email=email,
            role=role,
            language=language,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        username: str,
        nickname: str,
        email: str | None,
        password_hash: str,
        auth_key: str,
        password_reset_token: str | None,
        status: int,
        role: int,
        language: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        return cls(
            id=id,
            username=username,
            nickname=nickname,
            email=email,
            password_hash=password_hash,
            auth_key=auth_key,
            password_reset_token=password_reset_token,
            status=status,
            role=role,
            language=language,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username.value})"


def _validate_language(language: int) -> int:
    if isinstance(language, bool) or not isinstance(language, int):
        msg = f"Language must be an integer code, got {language!r}"
        raise TypeError(msg)
    return language


def _as_username(value: Union[str, Username]) -> Username:
    return value if isinstance(value, Username) else Username(value)


def _as_nickname(value: Union[str, Nickname]) -> Nickname:
    return value if isinstance(value, Nickname) else Nickname(value)
