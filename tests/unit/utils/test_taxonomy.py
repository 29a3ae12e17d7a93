from liftlog.models.user_settings import DEFAULT_MUSCLE_GROUP_TARGETS
from liftlog.utils import db
from liftlog.utils.taxonomy import (
    ANALYTICS_CATEGORIES,
    MUSCLE_GROUPS,
    location_ids_for_equipment,
)


def test_every_muscle_group_has_a_default_target():
    assert set(DEFAULT_MUSCLE_GROUP_TARGETS) == set(MUSCLE_GROUPS)


def test_analytics_categories_only_reference_known_groups():
    assert len(ANALYTICS_CATEGORIES) == 6
    for _, _, members in ANALYTICS_CATEGORIES:
        assert set(members) <= set(MUSCLE_GROUPS)


def test_portable_equipment_is_available_at_home():
    assert location_ids_for_equipment("dumbbell") == ["gym", "home"]
    assert location_ids_for_equipment("bodyweight") == ["gym", "home"]


def test_gym_equipment_is_gym_only():
    assert location_ids_for_equipment("cable") == ["gym"]
    assert location_ids_for_equipment(None) == ["gym"]


def test_build_keys():
    assert db.build_store_pk("ns") == "STORE#ns"
    assert db.build_collection_sk(db.CollectionKey.SETS) == "COLLECTION#sets"
