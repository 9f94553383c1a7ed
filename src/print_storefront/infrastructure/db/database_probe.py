"""SQLAlchemy adapter for store connectivity checks."""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from print_storefront.application.ports.database_probe_port import DatabaseProbePort


class SqlAlchemyDatabaseProbe(DatabaseProbePort):
    """Ping the configured database through the shared session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def ping(self) -> None:
        async with self._session_factory() as session:
            await session.execute(sa.text("SELECT 1"))
