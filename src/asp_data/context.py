"""The application database context.

``ApplicationDbContext`` is one unit of work against the store: it owns a
single ``AsyncSession`` and exposes the identity schema as entity sets.
The identity capabilities are composed in (session, entity sets,
repositories) rather than inherited from a framework base class.

Typical use::

    options = DbContextOptions.for_sqlite(":memory:")
    async with ApplicationDbContext(options) as db:
        await db.database.ensure_created()
        users = await db.users.to_list()

A context is not safe for concurrent use. Create one per unit of work,
or borrow a shared engine through ``DbContextFactory``.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Mapping, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from asp_data.database import DatabaseFacade
from asp_data.engine import create_engine_for
from asp_data.entity_set import EntitySet
from asp_data.exceptions import ContextDisposedError
from asp_data.options import DbContextOptions, coerce_options
from asp_identity.infrastructure.persistence.sqlalchemy import (
    IdentityBase,
    IdentityRepositoryFactory,
    RoleClaimModel,
    RoleModel,
    UserClaimModel,
    UserLoginModel,
    UserModel,
    UserRoleModel,
    UserTokenModel,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class ApplicationDbContext:
    """Database session bound to the identity schema.

    Parameters
    ----------
    options
        ``DbContextOptions`` or a mapping accepted by
        ``DbContextOptions.from_mapping``
    engine
        Engine to borrow. When omitted the context creates its own engine
        from ``options`` and disposes it together with the session.

    Raises
    ------
    ConfigurationError
        If ``options`` is None or malformed. Nothing is acquired in that
        case.
    """

    def __init__(
        self,
        options: DbContextOptions | Mapping[str, Any] | None,
        *,
        engine: AsyncEngine | None = None,
    ):
        self._options = coerce_options(options)
        self._owns_engine = engine is None
        self._engine = engine if engine is not None else create_engine_for(self._options)
        self._session = AsyncSession(
            self._engine,
            expire_on_commit=self._options.expire_on_commit,
        )
        self._disposed = False

        self.users: EntitySet[UserModel] = EntitySet(self._session, UserModel)
        self.roles: EntitySet[RoleModel] = EntitySet(self._session, RoleModel)
        self.user_roles: EntitySet[UserRoleModel] = EntitySet(self._session, UserRoleModel)
        self.user_claims: EntitySet[UserClaimModel] = EntitySet(
            self._session,
            UserClaimModel,
        )
        self.role_claims: EntitySet[RoleClaimModel] = EntitySet(
            self._session,
            RoleClaimModel,
        )
        self.user_logins: EntitySet[UserLoginModel] = EntitySet(
            self._session,
            UserLoginModel,
        )
        self.user_tokens: EntitySet[UserTokenModel] = EntitySet(
            self._session,
            UserTokenModel,
        )

        self.database = DatabaseFacade(self._session, IdentityBase.metadata)
        self._repositories: IdentityRepositoryFactory | None = None

        logger.debug(
            "Opened database context (%s, owns engine: %s)",
            self._options.display_url,
            self._owns_engine,
        )

    @property
    def options(self) -> DbContextOptions:
        return self._options

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def repositories(self) -> IdentityRepositoryFactory:
        """Identity repositories sharing this context's session."""
        if self._repositories is None:
            self._repositories = IdentityRepositoryFactory(self._session)
        return self._repositories

    def set(self, model: type[ModelT]) -> EntitySet[ModelT]:
        """Entity set for any mapped class, e.g. application entities."""
        return EntitySet(self._session, model)

    async def save_changes(self) -> None:
        """Commit pending changes.

        On failure the session is rolled back and the original SQLAlchemy
        or driver error is re-raised unchanged.
        """
        if self._disposed:
            raise ContextDisposedError

        try:
            await self._session.commit()
        except SQLAlchemyError:
            logger.exception("Saving changes failed, rolling back")
            await self._session.rollback()
            raise

    async def rollback(self) -> None:
        await self._session.rollback()

    async def dispose(self) -> None:
        """Release the session (and the engine when owned). Idempotent."""
        if self._disposed:
            return
        self._disposed = True

        try:
            await self._session.close()
        finally:
            if self._owns_engine:
                await self._engine.dispose()
        logger.debug("Disposed database context (%s)", self._options.display_url)

    async def __aenter__(self) -> ApplicationDbContext:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is not None and not self._disposed:
                await self._session.rollback()
        finally:
            await self.dispose()

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else "open"
        return f"ApplicationDbContext({self._options.provider}, {state})"
