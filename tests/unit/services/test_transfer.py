import json

import pytest

from liftlog.repositories.errors import DataImportError
from liftlog.services import transfer
from liftlog.utils.db import CollectionKey
from tests.test_data import BENCH, SQUAT, THIS_WEEK_DT, set_item, workout_item


@pytest.fixture
def seeded(fake_table):
    fake_table.seed(CollectionKey.EXERCISES, [SQUAT, BENCH])
    fake_table.seed(CollectionKey.WORKOUTS, [workout_item("w1", THIS_WEEK_DT)])
    fake_table.seed(
        CollectionKey.SETS,
        [
            set_item("s1", "squat", THIS_WEEK_DT, reps=5, weight=225),
            set_item("s2", "deleted-ex", THIS_WEEK_DT, reps=10, weight=22.5),
        ],
    )
    fake_table.seed(CollectionKey.USER_SETTINGS, {"weekStartDay": "sunday"})
    return fake_table


# ──────────────────────────── Export ────────────────────────────


def test_export_all_data_shape(fixed_now, seeded, store):
    data = transfer.export_all_data(store)

    assert set(data) == {
        "exercises",
        "templates",
        "locations",
        "workouts",
        "sets",
        "userSettings",
        "exportedAt",
        "version",
    }
    assert data["version"] == "1.0.0"
    assert data["exportedAt"] == "2025-01-15T12:00:00Z"
    assert data["userSettings"] == {"weekStartDay": "sunday"}
    assert len(data["sets"]) == 2


def test_export_to_json_is_indented(seeded, store):
    text = transfer.export_to_json(store)

    assert text.startswith('{\n  "exercises"')
    assert json.loads(text)["workouts"][0]["id"] == "w1"


def test_export_to_csv(seeded, store):
    lines = transfer.export_to_csv(store).split("\n")

    assert lines[0] == "Exercise Name,Date,Reps,Weight (lb),Workout ID"
    assert lines[1] == '"Back Squat",2025-01-15T18:00:00Z,5,225,"w1"'
    # orphaned set falls back to the exercise id
    assert lines[2] == '"deleted-ex",2025-01-15T18:00:00Z,10,22.5,"w1"'


def test_export_to_csv_with_no_sets_is_header_only(store):
    assert transfer.export_to_csv(store) == "Exercise Name,Date,Reps,Weight (lb),Workout ID"


# ──────────────────────────── Import ────────────────────────────


def test_import_overwrites_collections(seeded, store):
    data = transfer.export_all_data(store)
    data["exercises"] = [SQUAT]
    data["sets"] = []
    seeded.seed(CollectionKey.LOCATIONS, [{"id": "garage", "name": "Garage", "sortOrder": 0}])
    del data["locations"]

    transfer.import_data(store, data)

    assert seeded.read(CollectionKey.EXERCISES) == [SQUAT]
    assert seeded.read(CollectionKey.SETS) == []
    # no locations in the document, existing ones kept
    assert seeded.read(CollectionKey.LOCATIONS)[0]["id"] == "garage"


def test_import_round_trips_export(seeded, store, fake_table):
    exported = transfer.export_all_data(store)
    fake_table.items.clear()

    transfer.import_data(store, exported)

    assert fake_table.read(CollectionKey.SETS) == exported["sets"]
    assert fake_table.read(CollectionKey.USER_SETTINGS) == {"weekStartDay": "sunday"}


def test_import_rejects_incomplete_document(store):
    with pytest.raises(DataImportError) as excinfo:
        transfer.import_data(store, {"exercises": []})

    assert "templates" in str(excinfo.value)


def test_import_rejects_non_list_collections(seeded, store):
    data = transfer.export_all_data(store)
    data["sets"] = {"oops": True}

    with pytest.raises(DataImportError):
        transfer.import_data(store, data)

    assert len(seeded.read(CollectionKey.SETS)) == 2


@pytest.mark.parametrize(
    "user_settings",
    [None, {"muscleGroupTargets": None}, {"muscleGroupTargets": {"chest": -1}}],
)
def test_import_rejects_invalid_user_settings(seeded, store, user_settings):
    data = transfer.export_all_data(store)
    data["userSettings"] = user_settings

    with pytest.raises(DataImportError):
        transfer.import_data(store, data)

    assert seeded.read(CollectionKey.USER_SETTINGS) == {"weekStartDay": "sunday"}
