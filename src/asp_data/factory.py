"""Context factory sharing one engine across units of work."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Mapping

from asp_data.context import ApplicationDbContext
from asp_data.engine import create_engine_for
from asp_data.exceptions import ConfigurationError
from asp_data.options import DbContextOptions, coerce_options

logger = logging.getLogger(__name__)


class DbContextFactory:
    """Creates ``ApplicationDbContext`` instances over a shared engine.

    The engine (and its connection pool) lives as long as the factory;
    every context gets its own session. Long-running processes create one
    factory at startup and dispose it at shutdown.

    In-memory SQLite is rejected: such a database lives on a single
    connection, so contexts sharing it would see and roll back each
    other's uncommitted work. Use a file database or PostgreSQL, or a
    standalone ``ApplicationDbContext`` for a private in-memory store.

    Raises
    ------
    ConfigurationError
        If ``options`` is None, malformed, or an in-memory SQLite database

    Examples
    --------
    >>> factory = DbContextFactory(DbContextOptions.for_sqlite("data/app.db"))
    >>> async with factory.context() as db:
    ...     await db.users.count()
    >>> await factory.dispose()
    """

    def __init__(self, options: DbContextOptions | Mapping[str, Any] | None):
        self._options = coerce_options(options)
        if self._options.is_in_memory:
            msg = (
                "DbContextFactory needs a database that outlives a single "
                "connection; in-memory SQLite cannot be shared between contexts"
            )
            raise ConfigurationError(msg)
        self._engine = create_engine_for(self._options)
        self._disposed = False

    @property
    def options(self) -> DbContextOptions:
        return self._options

    def create(self) -> ApplicationDbContext:
        """Create a context borrowing the factory's engine.

        The caller disposes the context; the engine stays alive.
        """
        return ApplicationDbContext(self._options, engine=self._engine)

    @asynccontextmanager
    async def context(self) -> AsyncGenerator[ApplicationDbContext, None]:
        """Provide a context that rolls back on error and is always disposed."""
        db = self.create()
        try:
            yield db
        except Exception:
            await db.rollback()
            raise
        finally:
            await db.dispose()

    async def dispose(self) -> None:
        """Dispose the shared engine. Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        await self._engine.dispose()
        logger.debug("Disposed context factory (%s)", self._options.display_url)

    async def __aenter__(self) -> DbContextFactory:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.dispose()
