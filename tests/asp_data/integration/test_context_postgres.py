"""Integration tests for ApplicationDbContext with Testcontainers PostgreSQL."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from asp_data import ApplicationDbContext, DbContextFactory
from asp_identity.domain import Claim, DuplicateUserNameError, Role, User
from tests.shared.fixtures.database import make_user_model


@pytest.mark.integration
class TestPostgresContext:
    """The context against a real PostgreSQL server."""

    @pytest.mark.asyncio
    async def test_schema_created_and_empty(self, pg_context):
        assert "users" in await pg_context.database.table_names()
        assert await pg_context.users.count() == 0
        assert await pg_context.database.can_connect() is True

    @pytest.mark.asyncio
    async def test_ensure_created_is_idempotent(self, pg_context):
        assert await pg_context.database.ensure_created() is False

    @pytest.mark.asyncio
    async def test_data_visible_to_new_context(self, pg_context, pg_options):
        user = User.create("pg@example.com")
        await pg_context.repositories.user_repository().save(user)
        await pg_context.save_changes()

        async with ApplicationDbContext(pg_options) as other:
            found = await other.repositories.user_repository().find_by_email(
                "PG@example.com",
            )

        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_unique_constraint_error_propagates(self, pg_context):
        pg_context.users.add(make_user_model(uuid4(), "dup@example.com"))
        pg_context.users.add(make_user_model(uuid4(), "dup@example.com"))

        with pytest.raises(IntegrityError):
            await pg_context.save_changes()

        assert await pg_context.users.count() == 0

    @pytest.mark.asyncio
    async def test_repository_duplicate_check(self, pg_context):
        repo = pg_context.repositories.user_repository()
        await repo.save(User.create("a@example.com", user_name="same"))

        with pytest.raises(DuplicateUserNameError):
            await repo.save(User.create("b@example.com", user_name="Same"))

    @pytest.mark.asyncio
    async def test_roles_and_claims_round_trip(self, pg_context):
        users = pg_context.repositories.user_repository()
        roles = pg_context.repositories.role_repository()
        user = User.create("member@example.com")
        await users.save(user)
        await roles.save(Role.create("Admin"))
        await users.add_to_role(user.id, "admin")
        await users.add_claims(user.id, [Claim("dept", "ops")])
        await pg_context.save_changes()

        assert await users.get_roles(user.id) == ["Admin"]
        assert await users.get_claims(user.id) == [Claim("dept", "ops")]

    @pytest.mark.asyncio
    async def test_factory_contexts_share_pool(self, pg_context, pg_options):
        async with DbContextFactory(pg_options) as factory:
            async with factory.context() as db:
                db.users.add(make_user_model(uuid4(), "factory@example.com"))
                await db.save_changes()

            async with factory.context() as db:
                assert await db.users.count() == 1
