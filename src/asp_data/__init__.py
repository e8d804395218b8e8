"""ASP Data - the application database context.

Builds a unit-of-work session from explicit options and exposes the
identity schema (users, roles, claims, logins, tokens) as entity sets.

Usage:
    from asp_data import ApplicationDbContext, DbContextOptions

    options = DbContextOptions.for_sqlite(":memory:")
    async with ApplicationDbContext(options) as db:
        await db.database.ensure_created()
        assert await db.users.count() == 0
"""

from asp_data.context import ApplicationDbContext
from asp_data.database import DatabaseFacade
from asp_data.entity_set import EntitySet
from asp_data.exceptions import (
    ConfigurationError,
    ContextDisposedError,
    DataContextError,
)
from asp_data.factory import DbContextFactory
from asp_data.options import DbContextOptions, coerce_options

__all__ = [
    "ApplicationDbContext",
    "DatabaseFacade",
    "DbContextFactory",
    "DbContextOptions",
    "EntitySet",
    "coerce_options",
    # Exceptions
    "ConfigurationError",
    "ContextDisposedError",
    "DataContextError",
]
