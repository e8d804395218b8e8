"""Unit tests for the schema utilities used by the CLI."""

import pytest

from asp_data import ApplicationDbContext, DbContextOptions
from asp_data.schema import check_connection, create_tables, drop_tables, reset_tables
from asp_identity import Role


@pytest.fixture
def file_options(tmp_path) -> DbContextOptions:
    return DbContextOptions.for_sqlite(str(tmp_path / "nested" / "app.db"))


async def _table_names(options: DbContextOptions) -> list[str]:
    async with ApplicationDbContext(options) as db:
        return await db.database.table_names()


class TestSchemaUtilities:
    """create/drop/reset against a file database."""

    @pytest.mark.asyncio
    async def test_create_tables_creates_missing_directory(self, file_options, tmp_path):
        created = await create_tables(file_options)

        assert created is True
        assert (tmp_path / "nested" / "app.db").exists()
        assert "users" in await _table_names(file_options)

    @pytest.mark.asyncio
    async def test_create_tables_is_idempotent(self, file_options):
        await create_tables(file_options)

        assert await create_tables(file_options) is False

    @pytest.mark.asyncio
    async def test_drop_tables(self, file_options):
        await create_tables(file_options)

        await drop_tables(file_options)

        assert await _table_names(file_options) == []

    @pytest.mark.asyncio
    async def test_reset_tables_clears_data(self, file_options):
        await create_tables(file_options)
        async with ApplicationDbContext(file_options) as db:
            repo = db.repositories.role_repository()
            await repo.save(Role.create("Admin"))
            await db.save_changes()

        await reset_tables(file_options)

        async with ApplicationDbContext(file_options) as db:
            assert await db.roles.count() == 0

    @pytest.mark.asyncio
    async def test_check_connection(self, file_options):
        assert await check_connection(file_options) is True
