"""SQLAlchemy implementation for identity persistence.

Provides:
- IdentityBase: Declarative base shared by identity and application models
- UserModel, RoleModel, UserRoleModel: users, roles and memberships
- UserClaimModel, RoleClaimModel: claims
- UserLoginModel, UserTokenModel: external logins and provider tokens
- UserRepositorySQLAlchemy, RoleRepositorySQLAlchemy: repository implementations
- IdentityRepositoryFactory: repositories bound to one session
"""

from asp_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)
from asp_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleClaimModel,
    RoleModel,
    UserClaimModel,
    UserLoginModel,
    UserModel,
    UserRoleModel,
    UserTokenModel,
)
from asp_identity.infrastructure.persistence.sqlalchemy.repositories import (
    IdentityRepositoryFactory,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "IdentityRepositoryFactory",
    "RoleClaimModel",
    "RoleModel",
    "RoleRepositorySQLAlchemy",
    "TimestampMixin",
    "UserClaimModel",
    "UserLoginModel",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "UserRoleModel",
    "UserTokenModel",
]
