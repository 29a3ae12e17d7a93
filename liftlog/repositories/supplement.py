import uuid
from datetime import date as DateType
from datetime import datetime
from typing import List

from liftlog.models.supplement import Supplement, SupplementIntake
from liftlog.repositories.base import CollectionRepository
from liftlog.repositories.errors import RepoError, SupplementRepoError
from liftlog.repositories.store import CollectionStore
from liftlog.utils import dates
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


class StoreSupplementIntakeRepository(CollectionRepository[SupplementIntake]):
    key = CollectionKey.SUPPLEMENT_INTAKES
    model = SupplementIntake
    error_cls = SupplementRepoError

    def get_for_date(self, day: DateType) -> List[SupplementIntake]:
        return [i for i in self.get_all() if i.date == day]

    def add_intake(
        self, supplement_id: str, day: DateType, taken_at: datetime | None = None
    ) -> SupplementIntake:
        """
        Record an intake. Only one per supplement per day: a repeat returns the
        existing intake unchanged.
        """
        for intake in self.get_for_date(day):
            if intake.supplement_id == supplement_id:
                logger.debug(f"Intake already recorded for {supplement_id} on {day}")
                return intake

        intake = SupplementIntake(
            id=str(uuid.uuid4()),
            supplement_id=supplement_id,
            date=day,
            taken_at=taken_at or dates.now(),
        )
        return self.add(intake)

    def delete_for_supplement_and_date(self, supplement_id: str, day: DateType) -> bool:
        day_iso = day.isoformat()
        items = self._load_for_write()
        remaining = [
            i
            for i in items
            if not (
                isinstance(i, dict)
                and i.get("supplementId") == supplement_id
                and i.get("date") == day_iso
            )
        ]
        if len(remaining) == len(items):
            return False
        self._save_items(remaining)
        return True

    def delete_for_supplement(self, supplement_id: str) -> int:
        items = self._load_for_write()
        remaining = [
            i
            for i in items
            if not (isinstance(i, dict) and i.get("supplementId") == supplement_id)
        ]
        removed = len(items) - len(remaining)
        if removed:
            self._save_items(remaining)
        return removed

    def purge_orphaned(self, supplement_ids: set[str]) -> int:
        """
        Repair pass: drop intakes whose supplement no longer exists.
        Returns how many were removed.
        """
        items = self._load_for_write()
        remaining = [
            i for i in items if not isinstance(i, dict) or i.get("supplementId") in supplement_ids
        ]
        removed = len(items) - len(remaining)
        if removed:
            logger.info(f"Removing {removed} orphaned supplement intakes")
            self._save_items(remaining)
        return removed


class StoreSupplementRepository(CollectionRepository[Supplement]):
    key = CollectionKey.SUPPLEMENTS
    model = Supplement
    error_cls = SupplementRepoError

    def __init__(
        self,
        store: CollectionStore | None = None,
        intake_repo: StoreSupplementIntakeRepository | None = None,
    ):
        super().__init__(store)
        self._intakes = intake_repo or StoreSupplementIntakeRepository(self._store)

    def get_all(self) -> List[Supplement]:
        return sorted(super().get_all(), key=lambda s: s.sort_order)

    def create_supplement(self, name: str) -> Supplement:
        items = self._load_for_write()
        orders = [i.get("sortOrder", -1) for i in items if isinstance(i, dict)]
        supplement = Supplement(
            id=str(uuid.uuid4()), name=name, sort_order=max(orders, default=-1) + 1
        )
        items.append(supplement.to_item())
        self._save_items(items)
        return supplement

    def delete(self, record_id: str) -> bool:
        """
        Delete the supplement, then its intakes. If the second write fails the
        leftover intakes are reported and must be purged later.
        """
        deleted = super().delete(record_id)
        if not deleted:
            return False

        try:
            removed = self._intakes.delete_for_supplement(record_id)
        except RepoError as e:
            logger.error(
                f"Inconsistency: supplement {record_id} deleted but its intakes were not. "
                f"Run purge_orphaned_intakes to repair. Error: {e}"
            )
            raise SupplementRepoError(
                "Supplement deleted but failed to delete its intakes"
            ) from e

        logger.debug(f"Deleted {removed} intakes for supplement {record_id}")
        return True

    def purge_orphaned_intakes(self) -> int:
        supplement_ids = {
            s.get("id") for s in self._load_for_write() if isinstance(s, dict)
        }
        return self._intakes.purge_orphaned(supplement_ids)
