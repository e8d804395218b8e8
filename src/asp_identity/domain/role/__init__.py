"""Role domain."""

from asp_identity.domain.role.role import Role
from asp_identity.domain.role.role_repository import RoleRepository

__all__ = ["Role", "RoleRepository"]
