"""Application service reporting store connectivity for health checks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from print_storefront.application.ports.database_probe_port import DatabaseProbePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HealthReport:
    """Point-in-time health snapshot."""

    database_connected: bool
    checked_at: datetime
    version: str

    @property
    def is_healthy(self) -> bool:
        return self.database_connected


class HealthService:
    """Probe the store and summarize the result."""

    def __init__(
        self,
        *,
        probe: DatabaseProbePort,
        version: str,
        timeout_seconds: float = 5.0,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._probe = probe
        self._version = version
        self._timeout_seconds = timeout_seconds
        self._now = now or (lambda: datetime.now(tz=UTC))

    async def check(self) -> HealthReport:
        try:
            await asyncio.wait_for(self._probe.ping(), timeout=self._timeout_seconds)
            connected = True
        except Exception:
            logger.warning("health_database_unreachable", exc_info=True)
            connected = False

        return HealthReport(
            database_connected=connected,
            checked_at=self._now(),
            version=self._version,
        )
