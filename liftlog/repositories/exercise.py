import uuid
from typing import List, Protocol

from liftlog.data.seed import SEED_EXERCISES
from liftlog.models.exercise import Exercise, ExerciseCreate
from liftlog.repositories.base import CollectionRepository
from liftlog.repositories.errors import ExerciseRepoError
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger


class ExerciseRepository(Protocol):
    def get_all(self) -> List[Exercise]: ...
    def get_by_id(self, record_id: str) -> Exercise | None: ...
    def create_exercise(self, data: ExerciseCreate) -> Exercise: ...
    def add(self, record: Exercise) -> Exercise: ...
    def update(self, record: Exercise) -> Exercise: ...
    def delete(self, record_id: str) -> bool: ...
    def search(
        self,
        query: str = "",
        *,
        muscle_group: str | None = None,
        equipment: str | None = None,
        location_id: str | None = None,
    ) -> List[Exercise]: ...


class StoreExerciseRepository(CollectionRepository[Exercise]):
    """
    Exercise catalogue. Deleting an exercise leaves its logged sets in place;
    they render as orphaned.
    """

    key = CollectionKey.EXERCISES
    model = Exercise
    error_cls = ExerciseRepoError

    def _default_items(self) -> list[dict]:
        return SEED_EXERCISES

    def add(self, record: Exercise) -> Exercise:
        # Anything added after seeding is user-created.
        return super().add(record.model_copy(update={"is_custom": True}))

    def create_exercise(self, data: ExerciseCreate) -> Exercise:
        exercise = Exercise(
            id=str(uuid.uuid4()),
            name=data.name,
            equipment=data.equipment,
            cable_accessory=data.cable_accessory if data.equipment == "cable" else None,
            primary_muscle_groups=data.primary_muscle_groups,
            secondary_muscle_groups=data.secondary_muscle_groups,
            location_ids=data.location_ids,
            is_custom=True,
        )
        logger.debug(f"Creating exercise {exercise.id} '{exercise.name}'")
        return self.add(exercise)

    def search(
        self,
        query: str = "",
        *,
        muscle_group: str | None = None,
        equipment: str | None = None,
        location_id: str | None = None,
    ) -> List[Exercise]:
        """
        Case-insensitive name search with optional filters on primary muscle
        group, equipment and location.
        """
        needle = query.lower()
        results = []
        for exercise in self.get_all():
            if needle not in exercise.name.lower():
                continue
            if muscle_group and muscle_group not in exercise.primary_muscle_groups:
                continue
            if equipment and exercise.equipment != equipment:
                continue
            if location_id and not exercise.is_available_at(location_id):
                continue
            results.append(exercise)
        return results
