from fastapi import Depends

from liftlog.analytics.volume import VolumeAnalytics
from liftlog.repositories.exercise import ExerciseRepository, StoreExerciseRepository
from liftlog.repositories.routine import StoreRoutineRepository
from liftlog.repositories.store import CollectionStore, get_store
from liftlog.repositories.template import StoreTemplateRepository
from liftlog.repositories.user_settings import (
    StoreUserSettingsRepository,
    UserSettingsRepository,
)
from liftlog.repositories.workout import StoreWorkoutRepository, WorkoutRepository
from liftlog.repositories.workout_set import StoreWorkoutSetRepository
from liftlog.settings import settings


def get_exercise_repo(store: CollectionStore = Depends(get_store)) -> ExerciseRepository:
    return StoreExerciseRepository(store)


def get_template_repo(store: CollectionStore = Depends(get_store)) -> StoreTemplateRepository:
    return StoreTemplateRepository(store)


def get_workout_set_repo(
    store: CollectionStore = Depends(get_store),
) -> StoreWorkoutSetRepository:
    return StoreWorkoutSetRepository(store)


def get_workout_repo(
    store: CollectionStore = Depends(get_store),
    set_repo: StoreWorkoutSetRepository = Depends(get_workout_set_repo),
) -> WorkoutRepository:
    return StoreWorkoutRepository(store, set_repo)


def get_settings_repo(store: CollectionStore = Depends(get_store)) -> UserSettingsRepository:
    return StoreUserSettingsRepository(store)


def get_routine_repo(store: CollectionStore = Depends(get_store)) -> StoreRoutineRepository:
    return StoreRoutineRepository(store)


def get_analytics(
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    set_repo: StoreWorkoutSetRepository = Depends(get_workout_set_repo),
    settings_repo: UserSettingsRepository = Depends(get_settings_repo),
) -> VolumeAnalytics:
    return VolumeAnalytics(exercise_repo, set_repo, settings_repo, tz=settings.TIMEZONE)
