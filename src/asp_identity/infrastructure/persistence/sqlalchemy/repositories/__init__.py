# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from asp_identity.infrastructure.persistence.sqlalchemy.repositories.factory import (
    IdentityRepositoryFactory,
)
from asp_identity.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    RoleRepositorySQLAlchemy,
)
from asp_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityRepositoryFactory",
    "RoleRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
