"""Application service for new user registration."""

from __future__ import annotations

import logging
from functools import partial

from print_storefront.application.ports.password_hasher_port import PasswordHasherPort
from print_storefront.application.ports.user_repository_port import (
    DuplicateUserEmailError,
    UserCreateInput,
    UserProfile,
    UserRepositoryPort,
)
from print_storefront.application.services.guarded_calls import guard_hash_call, guard_store_call
from print_storefront.domain.auth.credentials import (
    normalize_user_email,
    normalize_user_name,
    normalize_user_phone,
    require_user_password,
)
from print_storefront.domain.auth.errors import ConflictError, ValidationError

DEFAULT_STORE_TIMEOUT_SECONDS = 5.0
DEFAULT_HASH_TIMEOUT_SECONDS = 10.0

logger = logging.getLogger(__name__)


class RegistrationService:
    """Validate signup input, hash the password, and persist one user."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
        store_timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS,
        hash_timeout_seconds: float = DEFAULT_HASH_TIMEOUT_SECONDS,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._store_timeout_seconds = store_timeout_seconds
        self._hash_timeout_seconds = hash_timeout_seconds

    async def register(
        self,
        *,
        name: str | None,
        email: str | None,
        password: str | None,
        phone: str | None = None,
    ) -> UserProfile:
        """Create one user account and return its sanitized profile."""

        try:
            normalized_name = normalize_user_name(name=name)
            normalized_email = normalize_user_email(email=email)
            plaintext = require_user_password(password=password)
            normalized_phone = normalize_user_phone(phone=phone)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        # Fast path only; the unique constraint on insert is authoritative.
        already_taken = await guard_store_call(
            self._users.email_exists(email=normalized_email),
            operation="email_exists",
            timeout_seconds=self._store_timeout_seconds,
        )
        if already_taken:
            logger.info("user_registration_conflict email=%s stage=precheck", normalized_email)
            raise ConflictError()

        password_hash = await guard_hash_call(
            partial(self._password_hasher.hash_password, plaintext),
            operation="hash_password",
            timeout_seconds=self._hash_timeout_seconds,
        )

        try:
            record = await guard_store_call(
                self._users.create_user(
                    UserCreateInput(
                        name=normalized_name,
                        email=normalized_email,
                        password_hash=password_hash,
                        phone=normalized_phone,
                    )
                ),
                operation="create_user",
                timeout_seconds=self._store_timeout_seconds,
            )
        except DuplicateUserEmailError as exc:
            logger.info("user_registration_conflict email=%s stage=insert", normalized_email)
            raise ConflictError() from exc

        logger.info("user_registered user_id=%s email=%s", record.user_id, record.email)
        return UserProfile.from_record(record)
