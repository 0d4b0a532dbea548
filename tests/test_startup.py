import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from employee_api import server
from employee_api.core.config import ConfigurationError, get_settings
from employee_api.db.session import connect, get_db, get_session_factory
from employee_api.main import app, create_app
from employee_api.models.employee import Employee
from tests.helpers import API, employee_body


@pytest.fixture()
def fresh_settings(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setattr(app.state, "session_factory", None)
    calls = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    yield calls
    get_settings.cache_clear()


def test_connect_creates_schema():
    session_factory = connect("sqlite://")
    db = session_factory()
    try:
        assert db.execute(select(func.count()).select_from(Employee)).scalar_one() == 0
    finally:
        db.close()
        session_factory.kw["bind"].dispose()


def test_missing_database_url_is_fatal(fresh_settings, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(SystemExit) as exc_info:
        server.main()
    assert exc_info.value.code == 1
    assert fresh_settings == []


def test_empty_database_url_is_fatal(fresh_settings, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    with pytest.raises(SystemExit) as exc_info:
        server.main()
    assert exc_info.value.code == 1
    assert fresh_settings == []


def test_connection_failure_is_fatal(fresh_settings, monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path}/no/such/dir/employees.db")
    with pytest.raises(SystemExit) as exc_info:
        server.main()
    assert exc_info.value.code == 1
    assert fresh_settings == []


def test_startup_connects_then_listens(fresh_settings, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("PORT", "3100")
    server.main()

    assert app.state.session_factory is not None
    assert len(fresh_settings) == 1
    args, kwargs = fresh_settings[0]
    assert args == (app,)
    assert kwargs["port"] == 3100


def test_app_builds_without_database_url(fresh_settings, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert isinstance(create_app(), FastAPI)


def test_lifespan_connects_when_launched_directly(fresh_settings, monkeypatch, tmp_path):
    """`uvicorn employee_api.main:app` without the entry point still connects"""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'employees.db'}")
    app.dependency_overrides.pop(get_session_factory, None)
    app.dependency_overrides.pop(get_db, None)

    with TestClient(app) as client:
        assert app.state.session_factory is not None
        r = client.get(API)
        assert r.status_code == 200
        assert r.json() == []

        assert client.post(API, json=employee_body()).status_code == 201
        assert [e["name"] for e in client.get(API).json()] == ["Ana"]

        engine = app.state.session_factory.kw["bind"]

    assert engine.pool.checkedout() == 0


def test_lifespan_without_database_url_reports_setup(fresh_settings, monkeypatch, caplog):
    monkeypatch.setenv("DATABASE_URL", "")

    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass

    assert "DATABASE_URL environment variable is not set" in caplog.text
    assert ".env.example" in caplog.text
    assert app.state.session_factory is None
