"""Port for user persistence operations used by credential services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class DuplicateUserEmailError(ValueError):
    """Raised when an insert violates the unique email constraint."""


@dataclass(frozen=True)
class UserRecord:
    """User persistence model."""

    user_id: int
    name: str
    email: str
    password_hash: str
    phone: str | None
    created_at: datetime


@dataclass(frozen=True)
class UserProfile:
    """User projection safe to return to callers; carries no credential material."""

    user_id: int
    name: str
    email: str
    phone: str | None
    created_at: datetime

    @classmethod
    def from_record(cls, record: UserRecord) -> UserProfile:
        return cls(
            user_id=record.user_id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            created_at=record.created_at,
        )


@dataclass(frozen=True)
class UserCreateInput:
    """Insert payload for one user row."""

    name: str
    email: str
    password_hash: str
    phone: str | None = None


class UserRepositoryPort(Protocol):
    """User repository contract."""

    async def get_by_email(self, *, email: str) -> UserRecord | None:
        """Return user by normalized email or None."""

    async def email_exists(self, *, email: str) -> bool:
        """Return whether a user with the normalized email exists."""

    async def create_user(self, payload: UserCreateInput) -> UserRecord:
        """Insert one user and return the stored row.

        Raises DuplicateUserEmailError when the email is already taken.
        """
