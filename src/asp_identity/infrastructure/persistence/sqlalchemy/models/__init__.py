# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for the identity schema."""

from asp_identity.infrastructure.persistence.sqlalchemy.models.claim_models import (
    RoleClaimModel,
    UserClaimModel,
)
from asp_identity.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
)
from asp_identity.infrastructure.persistence.sqlalchemy.models.user_login_model import (
    UserLoginModel,
    UserTokenModel,
)
from asp_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)
from asp_identity.infrastructure.persistence.sqlalchemy.models.user_role_model import (
    UserRoleModel,
)

__all__ = [
    "RoleClaimModel",
    "RoleModel",
    "UserClaimModel",
    "UserLoginModel",
    "UserModel",
    "UserRoleModel",
    "UserTokenModel",
]
