"""Credential lifecycle error taxonomy."""

from __future__ import annotations

from enum import StrEnum


class AuthErrorKind(StrEnum):
    """Externally visible failure kinds for signup and login."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    INVALID_CREDENTIALS = "invalid_credentials"
    INTERNAL = "internal"


class AuthError(Exception):
    """Base error for credential operations, tagged with one failure kind."""

    kind: AuthErrorKind = AuthErrorKind.INTERNAL
    public_message: str = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)


class ValidationError(AuthError):
    """Raised when credential input is missing, blank, or wider than its column."""

    kind = AuthErrorKind.VALIDATION
    public_message = "Required fields are missing or invalid."


class ConflictError(AuthError):
    """Raised when a registration targets an email that is already taken."""

    kind = AuthErrorKind.CONFLICT
    public_message = "Email is already registered."


class InvalidCredentialsError(AuthError):
    """Raised for unknown email and wrong password alike."""

    kind = AuthErrorKind.INVALID_CREDENTIALS
    public_message = "Invalid email or password."

    def __init__(self) -> None:
        super().__init__(self.public_message)


class InternalError(AuthError):
    """Raised for store, hashing, or timeout failures; the cause stays server-side."""

    kind = AuthErrorKind.INTERNAL
    public_message = "Internal server error."

    def __init__(self) -> None:
        super().__init__(self.public_message)
