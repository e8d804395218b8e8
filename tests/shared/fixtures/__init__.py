"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    db_context,
    pg_context,
    pg_options,
    postgres_container,
    seeded_context,
    sqlite_options,
)

__all__ = [
    "db_context",
    "pg_context",
    "pg_options",
    "postgres_container",
    "seeded_context",
    "sqlite_options",
]
