"""Schema introspection: which tables exist in the connected database."""

import logging
from dataclasses import dataclass

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaSnapshot:
    """Table names read once per report build."""

    tables: frozenset[str]

    def table_exists(self, name: str) -> bool:
        return name in self.tables


class SchemaInspector:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def snapshot(self) -> SchemaSnapshot:
        conn = await self._session.connection()
        names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        logger.debug("Schema snapshot: %d tables", len(names))
        return SchemaSnapshot(frozenset(names))
