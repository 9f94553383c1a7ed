from __future__ import annotations

import logging

import pytest

from print_storefront.infrastructure.logging import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_log_level(raw: str, expected: int) -> None:
    assert resolve_log_level(raw) == expected


def test_configure_logging_quiets_driver_loggers_above_debug() -> None:
    configure_logging(level="INFO")

    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("aiosqlite").level == logging.WARNING
