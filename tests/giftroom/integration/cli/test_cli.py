"""Tests for the giftroom CLI against a file-backed SQLite database."""

import asyncio

import pytest
from typer.testing import CliRunner

from giftroom.infrastructure.persistence.sqlalchemy.init_db import create_tables
from giftroom.presentation.api.dependencies import (
    get_database_url,
    get_engine,
    get_session_maker,
)
from giftroom.presentation.cli import app as cli_module
from giftroom.presentation.cli.app import app
from giftroom_config import clear_settings_cache
from tests.shared.fixtures.database import seed_default_rooms
from tests.shared.fixtures.factories import TestRoomFactory as F

runner = CliRunner()


def _clear_caches() -> None:
    clear_settings_cache()
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()


@pytest.fixture
def cli_database(tmp_path, monkeypatch):
    db_path = tmp_path / "giftroom.db"
    # CliRunner swaps stdout per invocation; keep pytest's logging handlers
    monkeypatch.setattr(cli_module, "configure_logging", lambda: None)
    monkeypatch.setenv("DATABASE_DSN", f"sqlite+aiosqlite:///{db_path}")
    _clear_caches()

    async def _prepare():
        engine = get_engine()
        try:
            await create_tables(engine)
            await seed_default_rooms(get_session_maker())
        finally:
            await engine.dispose()

    asyncio.run(_prepare())
    yield db_path
    _clear_caches()


class TestRoomCommands:
    def test_show_lists_participants(self, cli_database):
        result = runner.invoke(app, ["room", "show", F.MEMBER_CODE])

        assert result.exit_code == 0, result.output
        assert F.ROOM_NAME in result.output
        assert "Test User2" in result.output
        assert "admin" in result.output

    def test_show_unknown_code_fails(self, cli_database):
        result = runner.invoke(app, ["room", "show", "unknown"])

        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output
        assert "userCode" in result.output

    def test_remove_user_commits(self, cli_database):
        result = runner.invoke(
            app,
            ["room", "remove-user", F.ADMIN_CODE, str(F.TARGET_ID)],
        )
        shown = runner.invoke(app, ["room", "show", F.ADMIN_CODE])

        assert result.exit_code == 0, result.output
        assert f"Removed user {F.TARGET_ID}." in result.output
        assert "Test User2" not in shown.output
        assert "Test User3" in shown.output

    def test_remove_user_by_non_admin_fails(self, cli_database):
        result = runner.invoke(
            app,
            ["room", "remove-user", F.MEMBER_CODE, str(F.TARGET_ID)],
        )
        shown = runner.invoke(app, ["room", "show", F.ADMIN_CODE])

        assert result.exit_code == 1
        assert "NOT_AUTHORIZED" in result.output
        assert "Test User2" in shown.output


class TestDbCommands:
    def test_reset_with_force_empties_database(self, cli_database):
        result = runner.invoke(app, ["db", "reset", "--force"])
        shown = runner.invoke(app, ["room", "show", F.ADMIN_CODE])

        assert result.exit_code == 0, result.output
        assert "Database recreated." in result.output
        assert shown.exit_code == 1

    def test_drop_without_confirmation_aborts(self, cli_database):
        result = runner.invoke(app, ["db", "drop"], input="n\n")
        shown = runner.invoke(app, ["room", "show", F.ADMIN_CODE])

        assert result.exit_code == 1
        assert "Aborted." in result.output
        assert shown.exit_code == 0
