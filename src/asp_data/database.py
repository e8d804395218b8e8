"""Schema and connectivity helpers scoped to one context."""

import logging

from sqlalchemy import MetaData, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class DatabaseFacade:
    """Database-level operations running on the context's own connection.

    Working through the session (rather than a fresh engine connection)
    matters for in-memory SQLite, where the schema only exists on the
    connection that created it.
    """

    def __init__(self, session: AsyncSession, metadata: MetaData):
        self._session = session
        self._metadata = metadata

    async def table_names(self) -> list[str]:
        connection = await self._session.connection()
        return await connection.run_sync(
            lambda sync_conn: sorted(inspect(sync_conn).get_table_names()),
        )

    async def ensure_created(self) -> bool:
        """Create missing tables (idempotent).

        Existing tables and their data are never modified. Commits the
        session, including any pending changes.

        Returns
        -------
        True if at least one table was created
        """
        existing = set(await self.table_names())
        missing = [t for t in self._metadata.sorted_tables if t.name not in existing]

        if missing:
            connection = await self._session.connection()
            await connection.run_sync(self._metadata.create_all)
            logger.info(
                "Created %d table(s): %s",
                len(missing),
                ", ".join(t.name for t in missing),
            )
        else:
            logger.debug("Database schema is up to date")

        await self._session.commit()
        return bool(missing)

    async def ensure_deleted(self) -> None:
        """Drop every table known to the metadata (USE WITH CAUTION!)."""
        logger.warning("Dropping all database tables...")
        connection = await self._session.connection()
        await connection.run_sync(self._metadata.drop_all)
        await self._session.commit()
        logger.info("Database tables dropped")

    async def can_connect(self) -> bool:
        """Check database connectivity with ``SELECT 1``."""
        try:
            await self._session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database connectivity check failed: %s", e)
            await self._session.rollback()
            return False
        return True
