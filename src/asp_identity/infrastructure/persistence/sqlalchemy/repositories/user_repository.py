"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Iterable, Union
from uuid import UUID, uuid4

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from asp_identity.domain.exceptions import (
    DuplicateUserNameError,
    EmailAlreadyExistsError,
    LoginAlreadyAssociatedError,
    RoleNotFoundError,
    UserNotFoundError,
)
from asp_identity.domain.keys import normalize_key
from asp_identity.domain.shared.time import ensure_tz_aware
from asp_identity.domain.user import (
    Claim,
    Email,
    User,
    UserLoginInfo,
    UserRepository,
)
from asp_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserClaimModel,
    UserLoginModel,
    UserModel,
    UserRoleModel,
    UserTokenModel,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        return self._map_to_domain(model) if model else None

    async def find_by_name(self, user_name: str) -> User | None:
        stmt = select(UserModel).where(
            UserModel.normalized_user_name == normalize_key(user_name),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_key = (email if isinstance(email, Email) else Email(email)).normalized

        stmt = (
            select(UserModel)
            .where(UserModel.normalized_email == email_key)
            .order_by(UserModel.created_at)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def save(self, user: User) -> None:
        await self._ensure_unique(user)
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                self._session.add(self._map_to_model(user))
                logger.info("Created user: %s (user name: %s)", user.id, user.user_name)

            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise DuplicateUserNameError(user.user_name) from e
            raise

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return

        for child in (UserRoleModel, UserClaimModel, UserLoginModel, UserTokenModel):
            await self._session.execute(delete(child).where(child.user_id == user_id))

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user: %s", user_id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    # Roles

    async def add_to_role(self, user_id: UUID, role_name: str) -> None:
        await self._require_user(user_id)
        role = await self._require_role(role_name)

        if await self._session.get(UserRoleModel, (user_id, role.id)) is not None:
            return

        self._session.add(UserRoleModel(user_id=user_id, role_id=role.id))
        await self._session.flush()
        logger.info("Added user %s to role %s", user_id, role.name)

    async def remove_from_role(self, user_id: UUID, role_name: str) -> None:
        role = await self._require_role(role_name)
        await self._session.execute(
            delete(UserRoleModel).where(
                UserRoleModel.user_id == user_id,
                UserRoleModel.role_id == role.id,
            ),
        )
        await self._session.flush()
        logger.info("Removed user %s from role %s", user_id, role.name)

    async def get_roles(self, user_id: UUID) -> list[str]:
        stmt = (
            select(RoleModel.name)
            .join(UserRoleModel, UserRoleModel.role_id == RoleModel.id)
            .where(UserRoleModel.user_id == user_id)
            .order_by(RoleModel.name)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def is_in_role(self, user_id: UUID, role_name: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(UserRoleModel)
            .join(RoleModel, RoleModel.id == UserRoleModel.role_id)
            .where(
                UserRoleModel.user_id == user_id,
                RoleModel.normalized_name == normalize_key(role_name),
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def list_in_role(self, role_name: str) -> list[User]:
        stmt = (
            select(UserModel)
            .join(UserRoleModel, UserRoleModel.user_id == UserModel.id)
            .join(RoleModel, RoleModel.id == UserRoleModel.role_id)
            .where(RoleModel.normalized_name == normalize_key(role_name))
            .order_by(UserModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    # Claims

    async def add_claims(self, user_id: UUID, claims: Iterable[Claim]) -> None:
        await self._require_user(user_id)
        for claim in claims:
            self._session.add(
                UserClaimModel(
                    user_id=user_id,
                    claim_type=claim.type,
                    claim_value=claim.value,
                ),
            )
        await self._session.flush()

    async def get_claims(self, user_id: UUID) -> list[Claim]:
        stmt = (
            select(UserClaimModel)
            .where(UserClaimModel.user_id == user_id)
            .order_by(UserClaimModel.id)
        )
        result = await self._session.execute(stmt)
        return [
            Claim(type=model.claim_type, value=model.claim_value or "")
            for model in result.scalars().all()
        ]

    async def remove_claims(self, user_id: UUID, claims: Iterable[Claim]) -> None:
        for claim in claims:
            await self._session.execute(
                delete(UserClaimModel).where(
                    UserClaimModel.user_id == user_id,
                    UserClaimModel.claim_type == claim.type,
                    UserClaimModel.claim_value == claim.value,
                ),
            )
        await self._session.flush()

    async def list_for_claim(self, claim: Claim) -> list[User]:
        holders = select(UserClaimModel.user_id).where(
            UserClaimModel.claim_type == claim.type,
            UserClaimModel.claim_value == claim.value,
        )
        stmt = (
            select(UserModel)
            .where(UserModel.id.in_(holders))
            .order_by(UserModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    # External logins

    async def add_login(self, user_id: UUID, login: UserLoginInfo) -> None:
        await self._require_user(user_id)
        existing = await self._session.get(
            UserLoginModel,
            (login.login_provider, login.provider_key),
        )
        if existing is not None:
            if existing.user_id != user_id:
                raise LoginAlreadyAssociatedError(
                    login.login_provider,
                    login.provider_key,
                )
            return

        self._session.add(
            UserLoginModel(
                login_provider=login.login_provider,
                provider_key=login.provider_key,
                provider_display_name=login.display_name,
                user_id=user_id,
            ),
        )
        await self._session.flush()
        logger.info("Linked %s login to user %s", login.login_provider, user_id)

    async def find_by_login(self, login_provider: str, provider_key: str) -> User | None:
        login = await self._session.get(UserLoginModel, (login_provider, provider_key))
        if login is None:
            return None
        return await self.find_by_id(login.user_id)

    async def remove_login(
        self,
        user_id: UUID,
        login_provider: str,
        provider_key: str,
    ) -> None:
        await self._session.execute(
            delete(UserLoginModel).where(
                UserLoginModel.user_id == user_id,
                UserLoginModel.login_provider == login_provider,
                UserLoginModel.provider_key == provider_key,
            ),
        )
        await self._session.flush()

    async def get_logins(self, user_id: UUID) -> list[UserLoginInfo]:
        stmt = (
            select(UserLoginModel)
            .where(UserLoginModel.user_id == user_id)
            .order_by(UserLoginModel.login_provider, UserLoginModel.provider_key)
        )
        result = await self._session.execute(stmt)
        return [
            UserLoginInfo(
                login_provider=model.login_provider,
                provider_key=model.provider_key,
                display_name=model.provider_display_name,
            )
            for model in result.scalars().all()
        ]

    # Tokens

    async def set_token(
        self,
        user_id: UUID,
        login_provider: str,
        name: str,
        value: str | None,
    ) -> None:
        await self._require_user(user_id)
        token = await self._session.get(UserTokenModel, (user_id, login_provider, name))
        if token is None:
            self._session.add(
                UserTokenModel(
                    user_id=user_id,
                    login_provider=login_provider,
                    name=name,
                    value=value,
                ),
            )
        else:
            token.value = value
        await self._session.flush()

    async def get_token(self, user_id: UUID, login_provider: str, name: str) -> str | None:
        token = await self._session.get(UserTokenModel, (user_id, login_provider, name))
        return token.value if token else None

    async def remove_token(self, user_id: UUID, login_provider: str, name: str) -> None:
        token = await self._session.get(UserTokenModel, (user_id, login_provider, name))
        if token:
            await self._session.delete(token)
            await self._session.flush()

    # Helpers

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _require_user(self, user_id: UUID) -> UserModel:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(str(user_id))
        return model

    async def _require_role(self, role_name: str) -> RoleModel:
        stmt = select(RoleModel).where(
            RoleModel.normalized_name == normalize_key(role_name),
        )
        result = await self._session.execute(stmt)
        role = result.scalar_one_or_none()
        if role is None:
            raise RoleNotFoundError(role_name)
        return role

    async def _ensure_unique(self, user: User) -> None:
        """Reject duplicates before flushing so the session stays usable."""
        name_taken = select(UserModel.id).where(
            UserModel.normalized_user_name == user.normalized_user_name,
            UserModel.id != user.id,
        )
        if (await self._session.execute(name_taken)).first() is not None:
            raise DuplicateUserNameError(user.user_name)

        if user.normalized_email is None:
            return

        email_taken = select(UserModel.id).where(
            UserModel.normalized_email == user.normalized_email,
            UserModel.id != user.id,
        )
        if (await self._session.execute(email_taken)).first() is not None:
            raise EmailAlreadyExistsError(user.email)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            user_name=model.user_name,
            email=model.email,
            email_confirmed=model.email_confirmed,
            phone_number=model.phone_number,
            security_stamp=model.security_stamp,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            user_name=user.user_name,
            normalized_user_name=user.normalized_user_name,
            email=user.email,
            normalized_email=user.normalized_email,
            email_confirmed=user.email_confirmed,
            phone_number=user.phone_number,
            security_stamp=user.security_stamp,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.user_name = user.user_name
        model.normalized_user_name = user.normalized_user_name
        model.email = user.email
        model.normalized_email = user.normalized_email
        model.email_confirmed = user.email_confirmed
        model.phone_number = user.phone_number
        model.security_stamp = user.security_stamp
        model.concurrency_stamp = str(uuid4())
        model.updated_at = user.updated_at
