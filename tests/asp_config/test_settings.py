"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from asp_config import Settings, clear_settings_cache, get_settings
from asp_data import DbContextOptions


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "DATABASE_PROVIDER",
        "DATABASE_CONNECTION_STRING",
        "DATABASE_ECHO",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield monkeypatch
    clear_settings_cache()


class TestSettings:
    """Settings from environment variables."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.database_provider == "sqlite"
        assert settings.database_connection_string == "data/app.db"
        assert settings.database_echo is False
        assert settings.log_level == "INFO"

    def test_reads_environment(self, clean_env):
        clean_env.setenv("DATABASE_PROVIDER", "PostgreSQL")
        clean_env.setenv("DATABASE_CONNECTION_STRING", "Host=db;Database=app")
        clean_env.setenv("DATABASE_ECHO", "true")
        clean_env.setenv("LOG_LEVEL", "warning")

        settings = Settings(_env_file=None)

        assert settings.database_provider == "postgresql"
        assert settings.database_echo is True
        assert settings.log_level == "WARNING"

    def test_unknown_provider_rejected(self, clean_env):
        clean_env.setenv("DATABASE_PROVIDER", "oracle")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self, clean_env):
        first = get_settings()

        assert get_settings() is first

        clear_settings_cache()
        assert get_settings() is not first

    def test_options_from_settings(self, clean_env):
        clean_env.setenv("DATABASE_CONNECTION_STRING", ":memory:")

        options = DbContextOptions.from_settings(Settings(_env_file=None))

        assert options.is_in_memory is True
        assert options.pool_pre_ping is True
