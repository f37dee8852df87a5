"""Tests for application settings."""

import pytest

from giftroom_config import Settings, clear_settings_cache, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "DATABASE_DSN",
        "POSTGRES_HOST",
        "POSTGRES_PASSWORD",
        "API_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


class TestDatabaseUrl:
    def test_built_from_postgres_components(self):
        settings = Settings(
            _env_file=None,
            postgres_host="db",
            postgres_user="santa",
            postgres_password="secret",
            postgres_db="rooms",
        )

        assert (
            settings.database_url == "postgresql+asyncpg://santa:secret@db:5432/rooms"
        )
        assert settings.database_type == "postgresql"

    def test_dsn_takes_precedence(self):
        settings = Settings(
            _env_file=None,
            postgres_host="db",
            database_dsn="sqlite+aiosqlite:///./data/giftroom.db",
        )

        assert settings.database_url == "sqlite+aiosqlite:///./data/giftroom.db"
        assert settings.database_type == "sqlite"

    def test_dsn_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_DSN", "sqlite+aiosqlite://")

        assert Settings(_env_file=None).database_url == "sqlite+aiosqlite://"

    def test_password_is_not_exposed_in_repr(self):
        settings = Settings(_env_file=None, postgres_password="secret")

        assert "secret" not in repr(settings.postgres_password)


class TestCorsOrigins:
    def test_comma_separated_string(self):
        settings = Settings(
            _env_file=None,
            api_cors_origins="http://localhost:3000, https://gift.example ,",
        )

        assert settings.cors_origins == [
            "http://localhost:3000",
            "https://gift.example",
        ]

    def test_list_is_accepted(self):
        settings = Settings(_env_file=None, api_cors_origins=["http://a", "http://b"])

        assert settings.api_cors_origins == "http://a,http://b"
        assert settings.cors_origins == ["http://a", "http://b"]

    def test_empty_means_no_origins(self):
        assert Settings(_env_file=None).cors_origins == []


class TestGetSettings:
    def test_is_cached_until_cleared(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("DATABASE_DSN", "sqlite+aiosqlite://")
        clear_settings_cache()

        assert get_settings() is not first
        assert get_settings().database_url == "sqlite+aiosqlite://"
