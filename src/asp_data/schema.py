"""Schema utilities for the identity store.

These work on a short-lived context of their own and are what the
``asp-data db`` commands call. Tables are created from the ORM metadata;
there is no migration history.
"""

import logging

from asp_data.context import ApplicationDbContext
from asp_data.options import DbContextOptions

logger = logging.getLogger(__name__)


async def create_tables(options: DbContextOptions) -> bool:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.

    Returns
    -------
    True if at least one table was created
    """
    logger.info("Ensuring all database tables exist on %s", options.display_url)
    async with ApplicationDbContext(options) as db:
        created = await db.database.ensure_created()
    logger.info("Database schema is up to date (missing tables created if needed)")
    return created


async def drop_tables(options: DbContextOptions) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    async with ApplicationDbContext(options) as db:
        await db.database.ensure_deleted()


async def reset_tables(options: DbContextOptions) -> None:
    """Drop all tables and recreate them (USE WITH CAUTION!)."""
    async with ApplicationDbContext(options) as db:
        await db.database.ensure_deleted()
        await db.database.ensure_created()
    logger.info("Database recreated on %s", options.display_url)


async def check_connection(options: DbContextOptions) -> bool:
    async with ApplicationDbContext(options) as db:
        return await db.database.can_connect()
