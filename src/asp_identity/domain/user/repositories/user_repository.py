"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union
from uuid import UUID

from asp_identity.domain.user.aggregates.user import User
from asp_identity.domain.user.value_objects import Claim, Email, UserLoginInfo


class UserRepository(ABC):
    """Repository interface for User aggregates and their identity records.

    Besides the user row itself this covers the records hanging off a user:
    role memberships, claims, external logins and provider tokens.
    Implementations flush but never commit; the surrounding unit of work
    decides when changes become durable.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_name(self, user_name: str) -> Optional[User]:
        """Find a user by user name (case-insensitive)."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address (case-insensitive)."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user together with memberships, claims, logins and tokens."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users ordered by creation time."""

    # Roles

    @abstractmethod
    async def add_to_role(self, user_id: UUID, role_name: str) -> None:
        """Add the user to a role. Adding an existing membership is a no-op."""

    @abstractmethod
    async def remove_from_role(self, user_id: UUID, role_name: str) -> None:
        """Remove the user from a role."""

    @abstractmethod
    async def get_roles(self, user_id: UUID) -> list[str]:
        """Return the names of the user's roles."""

    @abstractmethod
    async def is_in_role(self, user_id: UUID, role_name: str) -> bool:
        """Check role membership."""

    @abstractmethod
    async def list_in_role(self, role_name: str) -> list[User]:
        """List users that belong to a role."""

    # Claims

    @abstractmethod
    async def add_claims(self, user_id: UUID, claims: Iterable[Claim]) -> None:
        """Attach claims to a user."""

    @abstractmethod
    async def get_claims(self, user_id: UUID) -> list[Claim]:
        """Return the user's claims."""

    @abstractmethod
    async def remove_claims(self, user_id: UUID, claims: Iterable[Claim]) -> None:
        """Remove matching claims from a user."""

    @abstractmethod
    async def list_for_claim(self, claim: Claim) -> list[User]:
        """List users holding the given claim."""

    # External logins

    @abstractmethod
    async def add_login(self, user_id: UUID, login: UserLoginInfo) -> None:
        """Link an external login to the user."""

    @abstractmethod
    async def find_by_login(
        self,
        login_provider: str,
        provider_key: str,
    ) -> Optional[User]:
        """Find the user linked to an external login."""

    @abstractmethod
    async def remove_login(
        self,
        user_id: UUID,
        login_provider: str,
        provider_key: str,
    ) -> None:
        """Unlink an external login."""

    @abstractmethod
    async def get_logins(self, user_id: UUID) -> list[UserLoginInfo]:
        """Return the user's external logins."""

    # Tokens

    @abstractmethod
    async def set_token(
        self,
        user_id: UUID,
        login_provider: str,
        name: str,
        value: str | None,
    ) -> None:
        """Store (or replace) a named token for a login provider."""

    @abstractmethod
    async def get_token(
        self,
        user_id: UUID,
        login_provider: str,
        name: str,
    ) -> str | None:
        """Read a stored token value."""

    @abstractmethod
    async def remove_token(self, user_id: UUID, login_provider: str, name: str) -> None:
        """Delete a stored token."""
