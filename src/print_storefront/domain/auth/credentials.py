"""Shared normalization helpers for user credential inputs."""

from __future__ import annotations

# Column widths of the users table.
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 20


def normalize_user_email(*, email: str | None) -> str:
    """Normalize one user email and reject missing, blank, or oversized values."""

    normalized = (email or "").strip().lower()
    if not normalized:
        raise ValueError("email cannot be blank")
    if len(normalized) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email cannot exceed {EMAIL_MAX_LENGTH} characters")
    return normalized


def normalize_user_name(*, name: str | None) -> str:
    """Normalize one display name and reject missing, blank, or oversized values."""

    normalized = (name or "").strip()
    if not normalized:
        raise ValueError("name cannot be blank")
    if len(normalized) > NAME_MAX_LENGTH:
        raise ValueError(f"name cannot exceed {NAME_MAX_LENGTH} characters")
    return normalized


def require_user_password(*, password: str | None) -> str:
    """Return the plaintext password unchanged, rejecting missing or empty values."""

    if not password:
        raise ValueError("password cannot be empty")
    return password


def normalize_user_phone(*, phone: str | None) -> str | None:
    """Normalize optional phone input; blank values become absent."""

    if phone is None:
        return None
    normalized = phone.strip()
    if len(normalized) > PHONE_MAX_LENGTH:
        raise ValueError(f"phone cannot exceed {PHONE_MAX_LENGTH} characters")
    return normalized or None
