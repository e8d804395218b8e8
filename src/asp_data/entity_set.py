"""Queryable collections of one mapped class."""

from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class EntitySet(Generic[ModelT]):
    """A collection of ``model`` rows seen through one session.

    Reads go straight to the database through the session; ``add`` and
    ``remove`` only stage changes. Nothing is committed until the owning
    context saves its changes.

    Examples
    --------
    >>> admins = await db.users.where(UserModel.email.like("%@corp.example"))
    >>> db.roles.add(RoleModel(name="Admin", normalized_name="ADMIN"))
    >>> await db.save_changes()
    """

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self._session = session
        self._model = model

    @property
    def model(self) -> type[ModelT]:
        return self._model

    def query(self) -> Select[tuple[ModelT]]:
        """Return a ``select`` over the set for custom filtering/ordering."""
        return select(self._model)

    async def to_list(self) -> list[ModelT]:
        result = await self._session.execute(self.query())
        return list(result.scalars().all())

    async def where(self, *criteria: Any) -> list[ModelT]:
        result = await self._session.execute(self.query().where(*criteria))
        return list(result.scalars().all())

    async def first_or_none(self, *criteria: Any) -> ModelT | None:
        stmt = self.query().where(*criteria).limit(1)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def find(self, primary_key: Any) -> ModelT | None:
        """Look up a row by primary key (a tuple for composite keys).

        Rows already loaded in the session are returned without a query.
        """
        return await self._session.get(self._model, primary_key)

    async def count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self._model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def any(self, *criteria: Any) -> bool:
        return await self.first_or_none(*criteria) is not None

    def add(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        return entity

    def add_range(self, entities: Iterable[ModelT]) -> None:
        self._session.add_all(list(entities))

    async def remove(self, entity: ModelT) -> None:
        await self._session.delete(entity)

    def __repr__(self) -> str:
        return f"EntitySet({self._model.__name__})"
