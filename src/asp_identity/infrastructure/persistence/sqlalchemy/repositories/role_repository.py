"""SQLAlchemy implementation of RoleRepository."""

import logging
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from asp_identity.domain.exceptions import DuplicateRoleNameError, RoleNotFoundError
from asp_identity.domain.keys import normalize_key
from asp_identity.domain.role import Role, RoleRepository
from asp_identity.domain.user import Claim
from asp_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleClaimModel,
    RoleModel,
    UserRoleModel,
)

logger = logging.getLogger(__name__)


class RoleRepositorySQLAlchemy(RoleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, role_id: UUID) -> Role | None:
        model = await self._session.get(RoleModel, role_id)
        return self._map_to_domain(model) if model else None

    async def find_by_name(self, name: str) -> Role | None:
        model = await self._find_model_by_name(name)
        return self._map_to_domain(model) if model else None

    async def save(self, role: Role) -> None:
        duplicate = await self._find_model_by_name(role.name)
        if duplicate is not None and duplicate.id != role.id:
            raise DuplicateRoleNameError(role.name)

        existing = await self._session.get(RoleModel, role.id)
        try:
            if existing:
                existing.name = role.name
                existing.normalized_name = role.normalized_name
                existing.concurrency_stamp = str(uuid4())
                logger.debug("Updated role: %s", role.id)
            else:
                self._session.add(
                    RoleModel(
                        id=role.id,
                        name=role.name,
                        normalized_name=role.normalized_name,
                    ),
                )
                logger.info("Created role: %s", role.name)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise DuplicateRoleNameError(role.name) from e
            raise

    async def delete(self, role_id: UUID) -> None:
        model = await self._session.get(RoleModel, role_id)
        if model is None:
            return

        await self._session.execute(
            delete(UserRoleModel).where(UserRoleModel.role_id == role_id),
        )
        await self._session.execute(
            delete(RoleClaimModel).where(RoleClaimModel.role_id == role_id),
        )
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted role: %s", model.name)

    async def list_all(self) -> list[Role]:
        result = await self._session.execute(select(RoleModel).order_by(RoleModel.name))
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def add_claim(self, role_id: UUID, claim: Claim) -> None:
        if await self._session.get(RoleModel, role_id) is None:
            raise RoleNotFoundError(str(role_id))

        self._session.add(
            RoleClaimModel(
                role_id=role_id,
                claim_type=claim.type,
                claim_value=claim.value,
            ),
        )
        await self._session.flush()

    async def get_claims(self, role_id: UUID) -> list[Claim]:
        stmt = (
            select(RoleClaimModel)
            .where(RoleClaimModel.role_id == role_id)
            .order_by(RoleClaimModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            Claim(type=model.claim_type, value=model.claim_value or "")
            for model in result.scalars().all()
        ]

    async def remove_claim(self, role_id: UUID, claim: Claim) -> None:
        await self._session.execute(
            delete(RoleClaimModel).where(
                RoleClaimModel.role_id == role_id,
                RoleClaimModel.claim_type == claim.type,
                RoleClaimModel.claim_value == claim.value,
            ),
        )
        await self._session.flush()

    async def _find_model_by_name(self, name: str) -> RoleModel | None:
        stmt = select(RoleModel).where(RoleModel.normalized_name == normalize_key(name))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: RoleModel) -> Role:
        return Role.reconstitute(id=model.id, name=model.name)
