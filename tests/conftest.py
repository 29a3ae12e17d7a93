import json
from datetime import datetime, timezone
from typing import Any

import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient

from liftlog.main import app
from liftlog.repositories.store import DynamoCollectionStore, get_store
from liftlog.utils import dates, db
from tests.test_data import NAMESPACE

# ─────────────────────────────────────────────────────────────
# Fake DynamoDB Table
# ─────────────────────────────────────────────────────────────


OP_NAMES = {
    "get_item": "GetItem",
    "put_item": "PutItem",
}


def _client_error(op_name: str, *, code: str = "500") -> ClientError:
    return ClientError(
        error_response={"Error": {"Code": code, "Message": f"Boom in {op_name}"}},
        operation_name=op_name,
    )


class FakeTable:
    """
    In-memory stand-in for a boto3 DynamoDB Table keyed on (PK, SK).

    - `fail_on`: operation names that should raise ClientError
      (e.g. {"get_item"}); can be changed mid-test.
    - `fail_put_for`: SK values whose put_item should raise ClientError.
    """

    def __init__(self, *, fail_on: set[str] | None = None):
        self.items: dict[tuple[str, str], dict] = {}
        self.fail_on: set[str] = set(fail_on or [])
        self.fail_put_for: set[str] = set()

        self.last_get_kwargs: dict | None = None
        self.put_calls: list[dict] = []

    def _maybe_fail(self, op: str):
        if op in self.fail_on or OP_NAMES[op] in self.fail_on:
            raise _client_error(OP_NAMES[op])

    def get_item(self, **kwargs):
        self._maybe_fail("get_item")
        self.last_get_kwargs = kwargs
        key = kwargs["Key"]
        item = self.items.get((key["PK"], key["SK"]))
        return {"Item": dict(item)} if item is not None else {}

    def put_item(self, **kwargs):
        self._maybe_fail("put_item")
        item = kwargs["Item"]
        if item["SK"] in self.fail_put_for:
            raise _client_error("PutItem")
        self.put_calls.append(kwargs)
        self.items[(item["PK"], item["SK"])] = dict(item)
        return {}

    # ---- test helpers ----

    def seed(self, key: str, value: Any, namespace: str = NAMESPACE) -> None:
        pk = db.build_store_pk(namespace)
        sk = db.build_collection_sk(key)
        self.items[(pk, sk)] = {"PK": pk, "SK": sk, "data": json.dumps(value)}

    def seed_raw(self, key: str, data: Any, namespace: str = NAMESPACE) -> None:
        pk = db.build_store_pk(namespace)
        sk = db.build_collection_sk(key)
        self.items[(pk, sk)] = {"PK": pk, "SK": sk, "data": data}

    def read(self, key: str, namespace: str = NAMESPACE) -> Any:
        item = self.items.get((db.build_store_pk(namespace), db.build_collection_sk(key)))
        return json.loads(item["data"]) if item else None

    def fail_writes_to(self, key: str) -> None:
        self.fail_put_for.add(db.build_collection_sk(key))

    def writes_to(self, key: str) -> int:
        sk = db.build_collection_sk(key)
        return sum(1 for call in self.put_calls if call["Item"]["SK"] == sk)


# ─────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def client_error():
    return _client_error


@pytest.fixture
def fake_table() -> FakeTable:
    return FakeTable()


@pytest.fixture
def store(fake_table) -> DynamoCollectionStore:
    return DynamoCollectionStore(table=fake_table, namespace=NAMESPACE)


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    now = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(dates, "now", lambda: now)
    return now


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture
def client(app_instance, store):
    """
    Client whose store is backed by the in-memory FakeTable.
    Lifespan (startup migrations) is not run.
    """
    app_instance.dependency_overrides[get_store] = lambda: store
    client = TestClient(app_instance, raise_server_exceptions=False)

    try:
        yield client
    finally:
        app_instance.dependency_overrides.pop(get_store, None)
