import pytest

from liftlog.utils.db import CollectionKey
from tests.test_data import LAST_WEEK_DT, THIS_WEEK_DT, set_item, workout_item


@pytest.fixture
def seeded(fake_table):
    fake_table.seed(
        CollectionKey.WORKOUTS,
        [workout_item("w1", LAST_WEEK_DT), workout_item("w2", THIS_WEEK_DT)],
    )
    fake_table.seed(
        CollectionKey.SETS,
        [
            set_item("s1", "squat", LAST_WEEK_DT, workoutId="w1"),
            set_item("s2", "squat", THIS_WEEK_DT, workoutId="w2"),
        ],
    )
    return fake_table


# ---------------------- List / detail ---------------------------


def test_list_workouts_newest_first(client, seeded):
    response = client.get("/workout/all")

    assert response.status_code == 200
    assert [w["id"] for w in response.json()] == ["w2", "w1"]


def test_view_workout_includes_sets(client, seeded):
    body = client.get("/workout/w1").json()

    assert body["workout"]["id"] == "w1"
    assert [s["id"] for s in body["sets"]] == ["s1"]
    assert body["sets"][0]["workoutId"] == "w1"


def test_view_missing_workout_404(client, seeded):
    assert client.get("/workout/nope").status_code == 404


# ---------------------- Create / complete ---------------------------


def test_create_workout(client, fixed_now, fake_table):
    response = client.post("/workout/create", json={"template_id": "push-gym"})

    assert response.status_code == 201
    body = response.json()
    assert body["templateId"] == "push-gym"
    assert body["startedAt"] == "2025-01-15T12:00:00Z"


def test_complete_workout(client, fixed_now, seeded):
    response = client.post("/workout/w2/complete")

    assert response.status_code == 200
    assert response.json()["completedAt"] == "2025-01-15T12:00:00Z"


def test_complete_missing_workout_404(client, seeded):
    assert client.post("/workout/nope/complete").status_code == 404


def test_add_set(client, fixed_now, seeded):
    response = client.post(
        "/workout/w2/set/add", json={"exercise_id": "squat", "reps": 5, "weight": 100}
    )

    assert response.status_code == 201
    assert response.json()["workoutId"] == "w2"
    assert len(seeded.read(CollectionKey.SETS)) == 3


def test_add_set_to_missing_workout_404(client, seeded):
    response = client.post("/workout/nope/set/add", json={"exercise_id": "squat", "reps": 5})
    assert response.status_code == 404


# ---------------------- Delete ---------------------------


def test_delete_workout_cascades(client, seeded):
    assert client.delete("/workout/w1").status_code == 204

    assert [s["id"] for s in seeded.read(CollectionKey.SETS)] == ["s2"]


def test_delete_workout_cascade_failure_is_500(client, seeded):
    seeded.fail_writes_to(CollectionKey.SETS)

    response = client.delete("/workout/w1")

    assert response.status_code == 500
    assert response.json() == {"status_code": 500, "detail": "Storage error"}


def test_delete_set_checks_workout(client, seeded):
    assert client.delete("/workout/w1/set/s2").status_code == 404
    assert client.delete("/workout/w2/set/s2").status_code == 204
    assert [s["id"] for s in seeded.read(CollectionKey.SETS)] == ["s1"]
