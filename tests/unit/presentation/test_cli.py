"""Tests for the typer CLI (schema management and seeding)."""

import pytest
from typer.testing import CliRunner

from roster.presentation.cli.app import app
from roster_config import clear_settings_cache

runner = CliRunner()


@pytest.fixture
def sqlite_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_DSN", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    clear_settings_cache()
    yield tmp_path / "cli.db"
    clear_settings_cache()


class TestDatabaseCommands:
    def test_init_creates_database_file(self, sqlite_env):
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0, result.output
        assert "Database schema is up to date" in result.output
        assert sqlite_env.exists()

    def test_reset_requires_confirmation(self, sqlite_env):
        result = runner.invoke(app, ["db", "reset"], input="n\n")

        assert result.exit_code != 0

    def test_reset_with_force(self, sqlite_env):
        result = runner.invoke(app, ["db", "reset", "--force"])

        assert result.exit_code == 0, result.output
        assert "recreated" in result.output


class TestSeedCommand:
    def test_seed_is_idempotent(self, sqlite_env):
        first = runner.invoke(app, ["seed"])
        second = runner.invoke(app, ["seed"])

        assert first.exit_code == 0, first.output
        assert "created" in first.output
        assert "admin@example.com" in first.output
        assert second.exit_code == 0, second.output
        assert "already exists" in second.output
