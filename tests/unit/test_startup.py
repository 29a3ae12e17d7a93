from fastapi.testclient import TestClient

from liftlog import main
from liftlog.migrations.engine import MigrationResult
from liftlog.settings import settings
from liftlog.utils.db import CollectionKey


def test_startup_runs_migrations_once(monkeypatch, fake_table, store):
    monkeypatch.setattr(main, "get_store", lambda: store)
    monkeypatch.setattr(settings, "RUN_MIGRATIONS_ON_STARTUP", True)

    with TestClient(main.app):
        pass

    assert fake_table.read(CollectionKey.INITIALIZED) is True
    assert main.app.state.migration_result.seeded is True


def test_startup_failure_does_not_stop_app(monkeypatch):
    class FailingEngine:
        def __init__(self, store):
            pass

        def run(self):
            return MigrationResult(failed_step=3, error="boom")

    monkeypatch.setattr(main, "get_store", lambda: object())
    monkeypatch.setattr(main, "MigrationEngine", FailingEngine)
    monkeypatch.setattr(settings, "RUN_MIGRATIONS_ON_STARTUP", True)

    with TestClient(main.app) as client:
        assert client.get("/healthz").status_code == 200

    assert main.app.state.migration_result.failed_step == 3


def test_startup_migrations_can_be_disabled(monkeypatch, fake_table, store):
    monkeypatch.setattr(main, "get_store", lambda: store)
    monkeypatch.setattr(settings, "RUN_MIGRATIONS_ON_STARTUP", False)

    with TestClient(main.app):
        pass

    assert fake_table.put_calls == []
