"""Factory for identity repositories bound to one session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from asp_identity.infrastructure.persistence.sqlalchemy.repositories.role_repository import (  # noqa: E501
    RoleRepositorySQLAlchemy,
)
from asp_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)


class IdentityRepositoryFactory:
    """Creates identity repositories that share the caller's session."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._role_repo: RoleRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def role_repository(self) -> RoleRepositorySQLAlchemy:
        if self._role_repo is None:
            self._role_repo = RoleRepositorySQLAlchemy(self._session)
        return self._role_repo
