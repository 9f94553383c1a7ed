"""SQLAlchemy adapter for user persistence."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import cast

import sqlalchemy as sa
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from print_storefront.application.ports.user_repository_port import (
    DuplicateUserEmailError,
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)
from print_storefront.infrastructure.db.metadata import users

_USER_COLUMNS = (
    users.c.id,
    users.c.name,
    users.c.email,
    users.c.password_hash,
    users.c.phone,
    users.c.created_at,
)


def _is_duplicate_email_error(error: IntegrityError) -> bool:
    message = str(error.orig).lower()
    return "email" in message


class SqlAlchemyUserRepository(UserRepositoryPort):
    """User repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_by_email(self, *, email: str) -> UserRecord | None:
        """Return user by normalized email or None."""

        statement = sa.select(*_USER_COLUMNS).where(users.c.email == email).limit(1)

        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        if row is None:
            return None
        return _to_user_record(row)

    async def email_exists(self, *, email: str) -> bool:
        """Return whether a user with the normalized email exists."""

        statement = sa.select(users.c.id).where(users.c.email == email).limit(1)

        async with self._session_factory() as session:
            result = await session.execute(statement)

        return result.first() is not None

    async def create_user(self, payload: UserCreateInput) -> UserRecord:
        """Insert one user row and return the stored record."""

        statement = (
            sa.insert(users)
            .values(
                name=payload.name,
                email=payload.email,
                password_hash=payload.password_hash,
                phone=payload.phone,
            )
            .returning(*_USER_COLUMNS)
        )

        async with self._session_factory() as session:
            try:
                result = await session.execute(statement)
                row = result.mappings().one()
                await session.commit()
            except IntegrityError as error:
                await session.rollback()
                if _is_duplicate_email_error(error):
                    raise DuplicateUserEmailError("Duplicate user email") from error
                raise

        return _to_user_record(row)


def _to_user_record(row: RowMapping) -> UserRecord:
    return UserRecord(
        user_id=int(row["id"]),
        name=cast(str, row["name"]),
        email=cast(str, row["email"]),
        password_hash=cast(str, row["password_hash"]),
        phone=cast("str | None", row["phone"]),
        created_at=_as_utc(cast(datetime, row["created_at"])),
    )


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back CURRENT_TIMESTAMP as naive UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
