import logging

import pytest
from pydantic import ValidationError

from agenda.common.config import Settings
from agenda.common.database import build_engine


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = Settings(_env_file=None)

    assert config.PROJECT_NAME == "Remix Contacts"
    assert config.is_sqlite
    assert config.log_level_value == logging.INFO


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/agenda")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Settings(_env_file=None)

    assert not config.is_sqlite
    assert config.LOG_LEVEL == "DEBUG"
    assert config.log_level_value == logging.DEBUG


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="LOUD")


async def test_sqlite_engine_skips_pool_options():
    engine = build_engine(
        Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite://")
    )

    assert engine.url.drivername == "sqlite+aiosqlite"
    await engine.dispose()
