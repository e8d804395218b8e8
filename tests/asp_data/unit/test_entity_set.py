"""Unit tests for EntitySet queries."""

from uuid import uuid4

import pytest

from asp_identity.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
    UserRoleModel,
)
from tests.shared.fixtures.database import (
    TEST_USER_EMAIL,
    TEST_USER_ID,
    TEST_USER_ID_2,
)


def _role(name: str) -> RoleModel:
    return RoleModel(id=uuid4(), name=name, normalized_name=name.upper())


class TestEntitySetReads:
    """Reading through an entity set."""

    @pytest.mark.asyncio
    async def test_to_list_returns_all_rows(self, seeded_context):
        users = await seeded_context.users.to_list()

        assert {u.id for u in users} == {TEST_USER_ID, TEST_USER_ID_2}

    @pytest.mark.asyncio
    async def test_where_filters(self, seeded_context):
        users = await seeded_context.users.where(UserModel.email == TEST_USER_EMAIL)

        assert [u.id for u in users] == [TEST_USER_ID]

    @pytest.mark.asyncio
    async def test_first_or_none(self, seeded_context):
        missing = await seeded_context.users.first_or_none(
            UserModel.email == "nobody@example.com",
        )
        found = await seeded_context.users.first_or_none(UserModel.id == TEST_USER_ID_2)

        assert missing is None
        assert found is not None
        assert found.id == TEST_USER_ID_2

    @pytest.mark.asyncio
    async def test_count_and_any_with_criteria(self, seeded_context):
        assert await seeded_context.users.count() == 2
        assert await seeded_context.users.count(UserModel.email == TEST_USER_EMAIL) == 1
        assert await seeded_context.users.any(UserModel.email_confirmed.is_(True)) is False
        assert await seeded_context.users.any() is True

    @pytest.mark.asyncio
    async def test_query_can_be_customized(self, seeded_context):
        stmt = seeded_context.users.query().order_by(UserModel.email.desc()).limit(1)
        result = await seeded_context.session.execute(stmt)

        assert result.scalar_one().id == TEST_USER_ID_2

    @pytest.mark.asyncio
    async def test_find_by_composite_key(self, seeded_context):
        role = seeded_context.roles.add(_role("Admin"))
        seeded_context.user_roles.add(UserRoleModel(user_id=TEST_USER_ID, role_id=role.id))
        await seeded_context.save_changes()

        link = await seeded_context.user_roles.find((TEST_USER_ID, role.id))

        assert link is not None
        assert await seeded_context.user_roles.find((TEST_USER_ID_2, role.id)) is None


class TestEntitySetWrites:
    """Staging changes through an entity set."""

    @pytest.mark.asyncio
    async def test_add_is_staged_until_save(self, db_context):
        db_context.roles.add(_role("Staged"))
        await db_context.rollback()

        assert await db_context.roles.count() == 0

    @pytest.mark.asyncio
    async def test_add_range(self, db_context):
        db_context.roles.add_range(_role(name) for name in ("A", "B", "C"))
        await db_context.save_changes()

        assert await db_context.roles.count() == 3

    @pytest.mark.asyncio
    async def test_remove(self, db_context):
        role = db_context.roles.add(_role("Temp"))
        await db_context.save_changes()

        await db_context.roles.remove(role)
        await db_context.save_changes()

        assert await db_context.roles.find(role.id) is None

    @pytest.mark.asyncio
    async def test_removing_user_cascades_to_role_links(self, seeded_context):
        """Foreign keys are enforced on SQLite connections."""
        role = seeded_context.roles.add(_role("Member"))
        seeded_context.user_roles.add(UserRoleModel(user_id=TEST_USER_ID, role_id=role.id))
        await seeded_context.save_changes()
        seeded_context.session.expunge_all()

        user = await seeded_context.users.find(TEST_USER_ID)
        await seeded_context.users.remove(user)
        await seeded_context.save_changes()

        assert await seeded_context.user_roles.count() == 0

    @pytest.mark.asyncio
    async def test_repr(self, db_context):
        assert repr(db_context.users) == "EntitySet(UserModel)"
