"""SQLAlchemy implementation of UserRepository."""

import logging
from enum import IntEnum
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from judgehub.domain.shared import ensure_tz_aware, utc_now
from judgehub_identity.domain.user import (
    LOOKUP_FIELDS,
    User,
    UsernameAlreadyExistsError,
    UserRepository,
)
from judgehub_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = frozenset(
    {
        "username",
        "nickname",
        "email",
        "password_hash",
        "auth_key",
        "password_reset_token",
        "status",
        "role",
        "language",
    }
)

# users.id is a 32-bit INTEGER on PostgreSQL; larger ids cannot match a row
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1


def _is_storable_id(value: Any) -> bool:
    return not isinstance(value, int) or _MIN_ID <= value <= _MAX_ID


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_one(self, **criteria: Any) -> User | None:
        unknown = set(criteria) - LOOKUP_FIELDS
        if unknown:
            msg = f"Unsupported user lookup fields: {sorted(unknown)}"
            raise ValueError(msg)

        if not _is_storable_id(criteria.get("id")):
            return None

        # Plain ints for enum-valued criteria such as status
        criteria = {
            key: int(value) if isinstance(value, IntEnum) else value
            for key, value in criteria.items()
        }
        stmt = select(UserModel).filter_by(**criteria).order_by(UserModel.id).limit(1)
        result = await self._session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_username(
        self,
        username: str,
        exclude_id: int | None = None,
    ) -> bool:
        stmt = select(UserModel.id).where(UserModel.username == username)
        if exclude_id is not None and _is_storable_id(exclude_id):
            stmt = stmt.where(UserModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id) if user.is_persisted else None

        try:
            if existing:
                self._update_model(existing, user)
                model = existing
            else:
                model = self._map_to_model(user)
                self._session.add(model)

            await self._session.flush()
        except IntegrityError as e:
            if "username" in str(e.orig).lower():
                raise UsernameAlreadyExistsError(user.username) from e
            raise

        if existing:
            logger.debug("Updated user: %s", model.id)
        else:
            logger.info("Created user: %s (username: %s)", model.id, user.username)
        user.mark_persisted(model.id, model.created_at, model.updated_at)

    async def update_fields(self, user_id: int, **fields: Any) -> int:
        unknown = set(fields) - _WRITABLE_FIELDS
        if unknown:
            msg = f"Unsupported user update fields: {sorted(unknown)}"
            raise ValueError(msg)
        if not fields or not _is_storable_id(user_id):
            return 0

        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                **{
                    key: int(value) if isinstance(value, IntEnum) else value
                    for key, value in fields.items()
                },
                updated_at=utc_now(),
            )
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, user_id: int | None) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            nickname=model.nickname,
            email=model.email,
            password_hash=model.password_hash,
            auth_key=model.auth_key,
            password_reset_token=model.password_reset_token,
            status=model.status,
            role=model.role,
            language=model.language,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        model = UserModel(id=user.id)
        self._update_model(model, user)
        return model

    def _update_model(self, model: UserModel, user: User) -> None:
        model.username = user.username
        model.nickname = user.nickname
        model.email = user.email
        model.password_hash = user.password_hash
        model.auth_key = user.auth_key
        model.password_reset_token = user.password_reset_token
        model.status = user.status.value
        model.role = user.role.value
        model.language = user.language
