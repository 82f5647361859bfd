from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the choreboard package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from choreboard.core import config as core_config  # noqa: E402
from choreboard.db.create_tables import create_all, drop_all  # noqa: E402
from choreboard.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database; full teardown so the file is not left locked."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("APP_NAME", "choreboardApp")
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "false")
    _clear_caches()

    engine = db_session.get_engine()
    drop_all(engine)
    create_all(engine)

    yield db_file

    drop_all(engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def client(temp_db):
    from choreboard.app import create_app

    return TestClient(create_app())
