import copy
import json
from typing import Any, Protocol

from botocore.exceptions import ClientError

from liftlog.repositories.errors import StoreReadError, StoreWriteError
from liftlog.settings import settings
from liftlog.utils import db
from liftlog.utils.log import logger


class CollectionStore(Protocol):
    def load(self, key: str, default: Any) -> Any: ...
    def get(self, key: str, default: Any) -> Any: ...
    def set(self, key: str, value: Any) -> None: ...


class DynamoCollectionStore:
    """
    Key/collection store backed by a single DynamoDB table.

    Each collection is one item whose `data` attribute holds the JSON-encoded
    value, so a write replaces the whole collection atomically. There are no
    cross-collection transactions.
    """

    def __init__(self, table=None, namespace: str | None = None):
        self._table = table or db.get_table()
        self._pk = db.build_store_pk(namespace or settings.STORE_NAMESPACE)

    def _key(self, key: str) -> dict:
        return {"PK": self._pk, "SK": db.build_collection_sk(key)}

    def load(self, key: str, default: Any) -> Any:
        """
        Strict read: a missing collection yields a copy of `default`,
        any storage or decoding failure raises StoreReadError.
        """
        try:
            resp = self._table.get_item(Key=self._key(key), ConsistentRead=True)
        except ClientError as e:
            logger.exception(f"DynamoDB get_item failed for {key}")
            raise StoreReadError(f"Failed to read {key}") from e

        item = resp.get("Item")
        if not item or "data" not in item:
            return copy.deepcopy(default)

        try:
            return json.loads(item["data"])
        except (TypeError, ValueError) as e:
            logger.error(f"Stored value for {key} is not valid JSON: {e}")
            raise StoreReadError(f"Corrupt value stored under {key}") from e

    def get(self, key: str, default: Any) -> Any:
        """Lenient read: failures degrade to `default`."""
        try:
            return self.load(key, default)
        except StoreReadError:
            logger.warning(f"Returning default for unreadable collection {key}")
            return copy.deepcopy(default)

    def set(self, key: str, value: Any) -> None:
        try:
            data = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error(f"Value for {key} is not JSON serialisable: {e}")
            raise StoreWriteError(f"Cannot serialise value for {key}") from e

        try:
            self._table.put_item(Item={**self._key(key), "data": data})
        except ClientError as e:
            logger.exception(f"DynamoDB put_item failed for {key}")
            raise StoreWriteError(f"Failed to write {key}") from e


def get_store() -> CollectionStore:  # pragma: no cover
    return DynamoCollectionStore()
