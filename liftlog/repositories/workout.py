import uuid
from datetime import date as DateType
from datetime import datetime
from typing import List, Protocol
from zoneinfo import ZoneInfo

from liftlog.models.workout import Workout, WorkoutCreate, WorkoutSet
from liftlog.repositories.base import CollectionRepository
from liftlog.repositories.errors import (
    RecordNotFoundError,
    RepoError,
    WorkoutRepoError,
)
from liftlog.repositories.store import CollectionStore
from liftlog.repositories.workout_set import StoreWorkoutSetRepository
from liftlog.utils import dates
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


class WorkoutRepository(Protocol):
    def get_all(self) -> List[Workout]: ...
    def get_by_id(self, record_id: str) -> Workout | None: ...
    def create_workout(self, data: WorkoutCreate) -> Workout: ...
    def complete_workout(
        self, workout_id: str, completed_at: datetime | None = None
    ) -> Workout: ...
    def get_workout_with_sets(
        self, workout_id: str
    ) -> tuple[Workout, List[WorkoutSet]]: ...
    def delete_workout_and_sets(self, workout_id: str) -> None: ...


class StoreWorkoutRepository(CollectionRepository[Workout]):
    """
    Workouts. Deleting a workout also deletes its sets.
    """

    key = CollectionKey.WORKOUTS
    model = Workout
    error_cls = WorkoutRepoError

    def __init__(
        self,
        store: CollectionStore | None = None,
        set_repo: StoreWorkoutSetRepository | None = None,
    ):
        super().__init__(store)
        self._sets = set_repo or StoreWorkoutSetRepository(self._store)

    # ----------------------- Get -----------------------------

    def get_all(self) -> List[Workout]:
        """Newest first."""
        return sorted(super().get_all(), key=lambda w: w.started_at, reverse=True)

    def get_workout_with_sets(self, workout_id: str) -> tuple[Workout, List[WorkoutSet]]:
        workout = self.get_by_id(workout_id)
        if workout is None:
            logger.warning(f"Workout not found: {workout_id}")
            raise RecordNotFoundError(f"Workout {workout_id} not found")
        return workout, self._sets.get_for_workout(workout_id)

    def get_in_range(self, start: datetime, end: datetime) -> List[Workout]:
        return [w for w in self.get_all() if start <= w.started_at <= end]

    def get_completed_dates_in_month(
        self, year: int, month: int, tz_name: str = "UTC"
    ) -> List[DateType]:
        """Unique calendar days in the month with at least one completed workout."""
        tz = ZoneInfo(tz_name)
        days = set()
        for workout in self.get_all():
            if not workout.is_completed:
                continue
            local = workout.started_at.astimezone(tz).date()
            if local.year == year and local.month == month:
                days.add(local)
        return sorted(days)

    # ----------------------- Add / Update -----------------------------

    def create_workout(self, data: WorkoutCreate) -> Workout:
        workout = Workout(
            id=str(uuid.uuid4()),
            started_at=data.started_at or dates.now(),
            completed_at=None,
            template_id=data.template_id,
        )
        logger.debug(f"Creating workout {workout.id}")
        return self.add(workout)

    def complete_workout(
        self, workout_id: str, completed_at: datetime | None = None
    ) -> Workout:
        workout = self.get_by_id(workout_id)
        if workout is None:
            raise RecordNotFoundError(f"Workout {workout_id} not found")

        completed = workout.model_copy(
            update={"completed_at": dates.ensure_utc(completed_at or dates.now())}
        )
        return self.update(completed)

    # ----------------------- Delete -----------------------------

    def delete_workout_and_sets(self, workout_id: str) -> None:
        """
        Delete the workout, then its sets. The two writes are not atomic: if the
        second fails, the leftover sets are reported and must be purged later.
        """
        logger.debug(f"Deleting workout {workout_id} and its sets")

        self.delete(workout_id)

        try:
            removed = self._sets.delete_for_workout(workout_id)
        except RepoError as e:
            logger.error(
                f"Inconsistency: workout {workout_id} deleted but its sets were not. "
                f"Run purge_orphaned_sets to repair. Error: {e}"
            )
            raise WorkoutRepoError(
                "Workout deleted but failed to delete its sets"
            ) from e

        logger.debug(f"Deleted {removed} sets for workout {workout_id}")

    def purge_orphaned_sets(self) -> int:
        workout_ids = {
            w.get("id") for w in self._load_for_write() if isinstance(w, dict)
        }
        return self._sets.purge_orphaned(workout_ids)
