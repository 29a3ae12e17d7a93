import uuid
from datetime import datetime
from typing import List

from liftlog.models.workout import WorkoutSet, WorkoutSetCreate
from liftlog.repositories.base import CollectionRepository
from liftlog.repositories.errors import WorkoutSetRepoError
from liftlog.utils import dates
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


class StoreWorkoutSetRepository(CollectionRepository[WorkoutSet]):
    key = CollectionKey.SETS
    model = WorkoutSet
    error_cls = WorkoutSetRepoError

    def create_set(self, workout_id: str, data: WorkoutSetCreate) -> WorkoutSet:
        new_set = WorkoutSet(
            id=str(uuid.uuid4()),
            workout_id=workout_id,
            exercise_id=data.exercise_id,
            reps=data.reps,
            weight=data.weight,
            logged_at=data.logged_at or dates.now(),
        )
        logger.debug(f"Logging set {new_set.id} for workout {workout_id}")
        return self.add(new_set)

    def get_for_workout(self, workout_id: str) -> List[WorkoutSet]:
        sets = [s for s in self.get_all() if s.workout_id == workout_id]
        return sorted(sets, key=lambda s: s.logged_at)

    def get_for_exercise(self, exercise_id: str) -> List[WorkoutSet]:
        return [s for s in self.get_all() if s.exercise_id == exercise_id]

    def get_in_range(self, start: datetime, end: datetime) -> List[WorkoutSet]:
        """Sets whose loggedAt falls in [start, end]."""
        return [s for s in self.get_all() if start <= s.logged_at <= end]

    def get_last_session_for_exercise(
        self, exercise_id: str, limit: int = 5
    ) -> List[WorkoutSet]:
        """
        Sets from the most recent workout that included this exercise,
        newest first. Used for "last time" hints.
        """
        sets = sorted(
            self.get_for_exercise(exercise_id), key=lambda s: s.logged_at, reverse=True
        )
        if not sets:
            return []

        last_workout_id = sets[0].workout_id
        return [s for s in sets if s.workout_id == last_workout_id][:limit]

    def delete_for_workout(self, workout_id: str) -> int:
        items = self._load_for_write()
        remaining = [
            i for i in items if not (isinstance(i, dict) and i.get("workoutId") == workout_id)
        ]
        removed = len(items) - len(remaining)
        if removed:
            self._save_items(remaining)
        return removed

    def purge_orphaned(self, workout_ids: set[str]) -> int:
        """
        Repair pass: drop sets whose workout no longer exists.
        Returns how many were removed.
        """
        items = self._load_for_write()
        remaining = [
            i for i in items if not isinstance(i, dict) or i.get("workoutId") in workout_ids
        ]
        removed = len(items) - len(remaining)
        if removed:
            logger.info(f"Removing {removed} orphaned sets")
            self._save_items(remaining)
        return removed
