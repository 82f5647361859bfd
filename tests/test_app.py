from __future__ import annotations

from contextlib import contextmanager

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker

from choreboard.app import create_app
from choreboard.core import config as core_config
from choreboard.db import session as db_session


def test_cors_exposes_location_and_alert_headers(temp_db, monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://flat.example")
    core_config.get_settings.cache_clear()
    client = TestClient(create_app())

    resp = client.post(
        "/api/flats",
        json={"name": "Dejvicka 12"},
        headers={"Origin": "https://flat.example"},
    )

    assert resp.status_code == 201
    assert resp.headers["access-control-allow-origin"] == "https://flat.example"
    exposed = {h.strip().lower() for h in resp.headers["access-control-expose-headers"].split(",")}
    assert {"location", "x-choreboardapp-alert", "x-choreboardapp-error", "x-choreboardapp-params"} <= exposed


def test_schema_is_created_on_the_given_engine(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'unused.db'}")
    monkeypatch.setenv("AUTO_CREATE_SCHEMA", "true")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()

    engine = create_engine(
        f"sqlite:///{tmp_path / 'flats.db'}", future=True, connect_args={"check_same_thread": False}
    )
    factory = sessionmaker(bind=engine, autoflush=False, future=True)

    @contextmanager
    def session_factory():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    try:
        with TestClient(create_app(session_factory, engine=engine)) as client:
            resp = client.post("/api/flats", json={"name": "Dejvicka 12"})
            assert resp.status_code == 201
            assert client.get(f"/api/flats/{resp.json()['id']}").status_code == 200

        assert inspect(engine).has_table("flat")
        assert not (tmp_path / "unused.db").exists()
    finally:
        engine.dispose()
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
