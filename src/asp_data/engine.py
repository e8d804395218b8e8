"""Async engine construction for a set of context options."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from asp_data.options import DbContextOptions

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_for(options: DbContextOptions) -> AsyncEngine:
    """Create the async engine described by ``options``.

    - In-memory SQLite keeps one connection for the lifetime of the engine
      (``StaticPool``), otherwise every connection would see an empty
      database.
    - File-based SQLite uses ``NullPool``; SQLite connections are cheap and
      pooling them across threads causes lock contention.
    - SQLite connections enforce foreign keys, so identity rows cascade
      like they do on PostgreSQL.
    """
    engine_kwargs: dict[str, Any] = {"echo": options.echo}

    if options.is_sqlite:
        if options.is_in_memory:
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["poolclass"] = NullPool
            db_path = options.database_url.database
            if db_path and not db_path.startswith("file:"):
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    else:
        engine_kwargs["pool_pre_ping"] = options.pool_pre_ping

    engine = create_async_engine(options.database_url, **engine_kwargs)

    if options.is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug("Created %s engine for %s", options.provider, options.display_url)
    return engine
