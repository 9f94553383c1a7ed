from __future__ import annotations

import pytest

from print_storefront.domain.auth.credentials import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    normalize_user_email,
    normalize_user_name,
    normalize_user_phone,
    require_user_password,
)


def test_email_is_trimmed_and_lowercased() -> None:
    assert normalize_user_email(email="  Kim@X.com ") == "kim@x.com"


@pytest.mark.parametrize("email", [None, "", "   "])
def test_missing_or_blank_email_is_rejected(email: str | None) -> None:
    with pytest.raises(ValueError, match="email"):
        normalize_user_email(email=email)


@pytest.mark.parametrize("name", [None, "", "  "])
def test_missing_or_blank_name_is_rejected(name: str | None) -> None:
    with pytest.raises(ValueError, match="name"):
        normalize_user_name(name=name)


def test_password_is_kept_verbatim() -> None:
    assert require_user_password(password=" pw 1234 ") == " pw 1234 "


@pytest.mark.parametrize("password", [None, ""])
def test_missing_password_is_rejected(password: str | None) -> None:
    with pytest.raises(ValueError, match="password"):
        require_user_password(password=password)


def test_blank_phone_becomes_absent() -> None:
    assert normalize_user_phone(phone=None) is None
    assert normalize_user_phone(phone="  ") is None
    assert normalize_user_phone(phone=" 010-1234-5678 ") == "010-1234-5678"


def test_values_at_column_width_are_accepted() -> None:
    assert normalize_user_name(name="n" * NAME_MAX_LENGTH) == "n" * NAME_MAX_LENGTH
    assert len(normalize_user_email(email="e" * EMAIL_MAX_LENGTH)) == EMAIL_MAX_LENGTH
    assert normalize_user_phone(phone="1" * PHONE_MAX_LENGTH) == "1" * PHONE_MAX_LENGTH


def test_oversized_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="name"):
        normalize_user_name(name="n" * (NAME_MAX_LENGTH + 1))


def test_oversized_email_is_rejected() -> None:
    with pytest.raises(ValueError, match="email"):
        normalize_user_email(email="e" * (EMAIL_MAX_LENGTH - 5) + "@x.com")


def test_oversized_phone_is_rejected() -> None:
    with pytest.raises(ValueError, match="phone"):
        normalize_user_phone(phone="1" * (PHONE_MAX_LENGTH + 1))
