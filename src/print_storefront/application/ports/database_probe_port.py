"""Port for store connectivity checks."""

from __future__ import annotations

from typing import Protocol


class DatabaseProbePort(Protocol):
    """Store reachability contract."""

    async def ping(self) -> None:
        """Run one trivial round trip; raise when the store is unreachable."""
