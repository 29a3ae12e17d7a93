from typing import List

from liftlog.data.seed import DEFAULT_LOCATIONS
from liftlog.models.location import WorkoutLocation
from liftlog.repositories.base import CollectionRepository, record_id_of
from liftlog.repositories.errors import LocationRepoError
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


def _next_sort_order(items: List[dict]) -> int:
    orders = [i.get("sortOrder", -1) for i in items if isinstance(i, dict)]
    return max(orders, default=-1) + 1


class StoreLocationRepository(CollectionRepository[WorkoutLocation]):
    """
    Workout locations, kept with a dense 0..n-1 sortOrder.
    """

    key = CollectionKey.LOCATIONS
    model = WorkoutLocation
    error_cls = LocationRepoError

    def _default_items(self) -> list[dict]:
        return DEFAULT_LOCATIONS

    def get_all(self) -> List[WorkoutLocation]:
        return sorted(super().get_all(), key=lambda loc: loc.sort_order)

    def add(self, record: WorkoutLocation) -> WorkoutLocation:
        items = self._load_for_write()
        location = record.model_copy(update={"sort_order": _next_sort_order(items)})
        items.append(location.to_item())
        self._save_items(items)
        return location

    def delete(self, record_id: str) -> bool:
        items = self._load_for_write()
        remaining = [i for i in items if record_id_of(i) != record_id]
        if len(remaining) == len(items):
            return False

        remaining.sort(key=lambda i: i.get("sortOrder", 0))
        for index, item in enumerate(remaining):
            item["sortOrder"] = index
        self._save_items(remaining)
        return True

    def reorder(self, location_ids: List[str]) -> List[WorkoutLocation]:
        """
        Persist locations in the given order. Ids that do not exist are
        ignored; locations missing from `location_ids` are dropped.
        """
        by_id = {record_id_of(i): i for i in self._load_for_write()}
        reordered = []
        for location_id in location_ids:
            item = by_id.get(location_id)
            if item is None:
                logger.warning(f"Ignoring unknown location {location_id} in reorder")
                continue
            reordered.append({**item, "sortOrder": len(reordered)})

        self._save_items(reordered)
        return self._to_models(reordered)
