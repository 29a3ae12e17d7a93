from typing import List

from liftlog.models.routine import Routine
from liftlog.repositories.base import CollectionRepository
from liftlog.repositories.errors import RecordNotFoundError, RoutineRepoError
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


class StoreRoutineRepository(CollectionRepository[Routine]):
    """
    Weekly routines. At most one routine is active at a time.
    """

    key = CollectionKey.ROUTINES
    model = Routine
    error_cls = RoutineRepoError

    def get_active(self) -> Routine | None:
        return next((r for r in self.get_all() if r.is_active), None)

    def add(self, record: Routine) -> Routine:
        items = self._load_for_write()
        if record.is_active:
            _deactivate_all(items)
        items.append(record.to_item())
        self._save_items(items)
        return record

    def update(self, record: Routine) -> Routine:
        items = self._load_for_write()
        index = self._index_of(items, record.id)
        if index is None:
            raise RecordNotFoundError(f"Routine {record.id} not found")

        if record.is_active:
            _deactivate_all(items)
        items[index] = record.to_item()
        self._save_items(items)
        return record

    def set_active(self, routine_id: str | None) -> Routine | None:
        """Activate one routine, or pass None to deactivate all."""
        items = self._load_for_write()
        if routine_id is not None and self._index_of(items, routine_id) is None:
            raise RecordNotFoundError(f"Routine {routine_id} not found")

        _deactivate_all(items)
        if routine_id is None:
            logger.debug("Deactivating all routines")
            self._save_items(items)
            return None

        index = self._index_of(items, routine_id)
        items[index]["isActive"] = True  # type: ignore[index]
        self._save_items(items)
        return self._to_model(items[index])  # type: ignore[index]

    def templates_for_day(self, routine_id: str, day: int) -> List[str]:
        routine = self.get_by_id(routine_id)
        if routine is None:
            raise RecordNotFoundError(f"Routine {routine_id} not found")
        return routine.templates_for_day(day)


def _deactivate_all(items: List[dict]) -> None:
    for item in items:
        if isinstance(item, dict):
            item["isActive"] = False
