from typing import Any, Generic, List, TypeVar

from pydantic import ValidationError

from liftlog.models.base import StoredModel
from liftlog.repositories.errors import (
    RecordNotFoundError,
    RepoError,
    StoreReadError,
    StoreWriteError,
)
from liftlog.repositories.store import CollectionStore
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger

T = TypeVar("T", bound=StoredModel)


class CollectionRepository(Generic[T]):
    """
    Base class for repositories over one named store collection.

    Every write reads the whole collection, changes it and writes it back.
    Model-returning reads skip records that fail validation; writes operate on
    the raw records so those are never dropped.
    """

    key: CollectionKey
    model: type[T]
    error_cls: type[RepoError] = RepoError

    def __init__(self, store: CollectionStore | None = None):
        from liftlog.repositories.store import get_store

        self._store = store or get_store()

    def _default_items(self) -> list[dict]:
        return []

    def _load_items(self) -> List[dict]:
        items = self._store.get(self.key, self._default_items())
        if not isinstance(items, list):
            logger.warning(f"Collection {self.key} is not a list, treating as empty")
            return []
        return items

    def _load_for_write(self) -> List[dict]:
        """
        Strict read for read-modify-write paths. A failed or corrupt read raises
        instead of degrading, so the following write can never replace the
        stored collection with an empty one.
        """
        try:
            items = self._store.load(self.key, self._default_items())
        except StoreReadError as e:
            raise self.error_cls(f"Failed to read {self.key} from store") from e
        if not isinstance(items, list):
            logger.error(f"Collection {self.key} is not a list, refusing to write")
            raise self.error_cls(f"Collection {self.key} is corrupt")
        return items

    def _save_items(self, items: List[dict]) -> None:
        try:
            self._store.set(self.key, items)
        except StoreWriteError as e:
            logger.error(f"Failed to save {self.key}: {e}")
            raise self.error_cls(f"Failed to write {self.key} to store") from e

    def _to_model(self, item: Any) -> T | None:
        try:
            return self.model.model_validate(item)
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed {self.key} record {record_id_of(item)}: "
                f"{e.error_count()} validation error(s)"
            )
            return None

    def _to_models(self, items: List[dict]) -> List[T]:
        models = (self._to_model(item) for item in items)
        return [m for m in models if m is not None]

    @staticmethod
    def _index_of(items: List[dict], record_id: str) -> int | None:
        for index, item in enumerate(items):
            if record_id_of(item) == record_id:
                return index
        return None

    # ----------------------- Get -----------------------------

    def get_all(self) -> List[T]:
        return self._to_models(self._load_items())

    def get_by_id(self, record_id: str) -> T | None:
        items = self._load_items()
        index = self._index_of(items, record_id)
        if index is None:
            return None
        return self._to_model(items[index])

    # ----------------------- Add / Update -----------------------------

    def add(self, record: T) -> T:
        logger.debug(f"Adding {self.key} record {record.id}")  # type: ignore[attr-defined]
        items = self._load_for_write()
        items.append(record.to_item())
        self._save_items(items)
        return record

    def add_many(self, records: List[T]) -> List[T]:
        """Append several records with a single collection write."""
        if not records:
            return []
        items = self._load_for_write()
        items.extend(r.to_item() for r in records)
        self._save_items(items)
        return records

    def update(self, record: T) -> T:
        record_id = record.id  # type: ignore[attr-defined]
        items = self._load_for_write()
        index = self._index_of(items, record_id)
        if index is None:
            raise RecordNotFoundError(f"{self.key} record {record_id} not found")

        items[index] = record.to_item()
        self._save_items(items)
        return record

    def replace_all(self, records: List[T]) -> None:
        self._save_items([r.to_item() for r in records])

    # ----------------------- Delete -----------------------------

    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns False when nothing matched."""
        items = self._load_for_write()
        remaining = [i for i in items if record_id_of(i) != record_id]
        if len(remaining) == len(items):
            logger.debug(f"No {self.key} record {record_id} to delete")
            return False

        self._save_items(remaining)
        return True


def record_id_of(item: Any) -> str | None:
    return item.get("id") if isinstance(item, dict) else None
