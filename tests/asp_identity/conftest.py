"""
Pytest configuration for asp_identity domain tests.

This conftest provides fixtures specific to the identity domain
(users, roles) and re-exports the shared database fixtures.
"""

import pytest

from asp_identity.domain import Role, User
from tests.shared.fixtures.database import (
    db_context,
    seeded_context,
    sqlite_options,
)

__all__ = [
    "db_context",
    "seeded_context",
    "sqlite_options",
]


@pytest.fixture
def test_user() -> User:
    """Create a standard test user."""
    return User.create("test@example.com")


@pytest.fixture
def admin_role() -> Role:
    """Administrator role."""
    return Role.create("Administrator")


@pytest.fixture
def user_repo(db_context):
    """User repository bound to the test context's session."""
    return db_context.repositories.user_repository()


@pytest.fixture
def role_repo(db_context):
    """Role repository bound to the test context's session."""
    return db_context.repositories.role_repository()
