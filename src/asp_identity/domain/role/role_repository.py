"""Role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from asp_identity.domain.role.role import Role
from asp_identity.domain.user.value_objects import Claim


class RoleRepository(ABC):
    """Repository interface for Role aggregates and role claims."""

    @abstractmethod
    async def find_by_id(self, role_id: UUID) -> Optional[Role]:
        """Find a role by its ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Role]:
        """Find a role by name (case-insensitive)."""

    @abstractmethod
    async def save(self, role: Role) -> None:
        """Save or update a role."""

    @abstractmethod
    async def delete(self, role_id: UUID) -> None:
        """Delete a role, its memberships and its claims."""

    @abstractmethod
    async def list_all(self) -> list[Role]:
        """List all roles ordered by name."""

    @abstractmethod
    async def add_claim(self, role_id: UUID, claim: Claim) -> None:
        """Attach a claim to a role."""

    @abstractmethod
    async def get_claims(self, role_id: UUID) -> list[Claim]:
        """Return the role's claims."""

    @abstractmethod
    async def remove_claim(self, role_id: UUID, claim: Claim) -> None:
        """Remove a matching claim from a role."""
