"""Application authentication service for credential verification."""

from __future__ import annotations

import logging
from functools import partial

from print_storefront.application.ports.password_hasher_port import PasswordHasherPort
from print_storefront.application.ports.user_repository_port import (
    UserProfile,
    UserRepositoryPort,
)
from print_storefront.application.services.guarded_calls import guard_hash_call, guard_store_call
from print_storefront.domain.auth.credentials import normalize_user_email, require_user_password
from print_storefront.domain.auth.errors import InvalidCredentialsError, ValidationError

DEFAULT_STORE_TIMEOUT_SECONDS = 5.0
DEFAULT_HASH_TIMEOUT_SECONDS = 10.0
_TIMING_EQUALIZER_PASSWORD = "unknown-account-placeholder"

logger = logging.getLogger(__name__)


class AuthService:
    """Authenticate email/password credentials against stored hashes."""

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
        self._equalizer_hash: str | None = None

    async def authenticate(self, *, email: str | None, password: str | None) -> UserProfile:
        """Return the sanitized profile for valid credentials.

        Unknown email and wrong password raise the same InvalidCredentialsError.
        """

        try:
            normalized_email = normalize_user_email(email=email)
            plaintext = require_user_password(password=password)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        user = await guard_store_call(
            self._users.get_by_email(email=normalized_email),
            operation="get_by_email",
            timeout_seconds=self._store_timeout_seconds,
        )
        if user is None:
            await self._verify_against_equalizer_hash(password=plaintext)
            logger.info("login_failed email=%s reason=unknown_email", normalized_email)
            raise InvalidCredentialsError()

        is_valid = await guard_hash_call(
            partial(
                self._password_hasher.verify_password,
                password=plaintext,
                password_hash=user.password_hash,
            ),
            operation="verify_password",
            timeout_seconds=self._hash_timeout_seconds,
        )
        if not is_valid:
            logger.info("login_failed email=%s reason=wrong_password", normalized_email)
            raise InvalidCredentialsError()

        logger.info("login_success user_id=%s email=%s", user.user_id, user.email)
        return UserProfile.from_record(user)

    async def _verify_against_equalizer_hash(self, *, password: str) -> None:
        """Run one full verification against a fixed hash for unknown emails."""

        if self._equalizer_hash is None:
            self._equalizer_hash = await guard_hash_call(
                partial(self._password_hasher.hash_password, _TIMING_EQUALIZER_PASSWORD),
                operation="hash_equalizer_password",
                timeout_seconds=self._hash_timeout_seconds,
            )
        await guard_hash_call(
            partial(
                self._password_hasher.verify_password,
                password=password,
                password_hash=self._equalizer_hash,
            ),
            operation="verify_password",
            timeout_seconds=self._hash_timeout_seconds,
        )
