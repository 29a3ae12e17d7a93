import pytest

from liftlog.analytics.volume import VolumeAnalytics
from liftlog.repositories.exercise import StoreExerciseRepository
from liftlog.repositories.user_settings import StoreUserSettingsRepository
from liftlog.repositories.workout_set import StoreWorkoutSetRepository
from liftlog.utils.db import CollectionKey
from tests.test_data import BENCH, FOREARM_CURL, LEGACY_EXERCISE, PUSHUP, SQUAT


@pytest.fixture
def exercises_seeded(fake_table):
    fake_table.seed(
        CollectionKey.EXERCISES, [SQUAT, BENCH, PUSHUP, FOREARM_CURL, LEGACY_EXERCISE]
    )
    return fake_table


@pytest.fixture
def analytics(exercises_seeded, store) -> VolumeAnalytics:
    return VolumeAnalytics(
        StoreExerciseRepository(store),
        StoreWorkoutSetRepository(store),
        StoreUserSettingsRepository(store),
        tz="UTC",
    )
