"""Timeout-bounded wrappers translating low-level failures into InternalError."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from print_storefront.application.ports.user_repository_port import DuplicateUserEmailError
from print_storefront.domain.auth.errors import InternalError

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def guard_store_call(
    awaitable: Awaitable[T],
    *,
    operation: str,
    timeout_seconds: float,
) -> T:
    """Await one repository call under a timeout, masking store failures.

    DuplicateUserEmailError passes through untouched so callers can map it.
    """

    try:
        return await asyncio.wait_for(awaitable, timeout=timeout_seconds)
    except DuplicateUserEmailError:
        raise
    except TimeoutError as error:
        logger.error(
            "store_call_timeout operation=%s timeout_seconds=%s",
            operation,
            timeout_seconds,
        )
        raise InternalError() from error
    except Exception as error:
        logger.exception("store_call_failed operation=%s", operation)
        raise InternalError() from error


async def guard_hash_call(
    func: Callable[[], T],
    *,
    operation: str,
    timeout_seconds: float,
) -> T:
    """Run one blocking hasher call in a worker thread under a timeout."""

    try:
        return await asyncio.wait_for(asyncio.to_thread(func), timeout=timeout_seconds)
    except TimeoutError as error:
        logger.error(
            "hash_call_timeout operation=%s timeout_seconds=%s",
            operation,
            timeout_seconds,
        )
        raise InternalError() from error
    except Exception as error:
        logger.exception("hash_call_failed operation=%s", operation)
        raise InternalError() from error
