import pytest

from liftlog.data.historical import IMPORTED_EXERCISES, IMPORTED_SETS, IMPORTED_WORKOUTS
from liftlog.data.seed import DEFAULT_LOCATIONS, SEED_EXERCISES, SEED_TEMPLATES
from liftlog.migrations import steps

# ──────────────────────────── Fixtures ────────────────────────────

V1_TEMPLATES = [
    {"id": "push-gym", "name": "Push Day", "exerciseIds": ["bench"]},
    {"id": "pull-gym", "name": "Pull Day", "exerciseIds": [], "location": "home"},
    {"id": "legs-gym", "name": "Leg Day", "exerciseIds": []},
    {"id": "t-lower", "name": "Lower Body", "exerciseIds": []},
]

V4_EXERCISES = [
    {"id": "bench", "name": "Bench", "equipment": "barbell", "primaryMuscleGroup": "chest", "location": "gym"},
    {"id": "db-row", "name": "DB Row", "equipment": "dumbbell", "primaryMuscleGroup": "upper_back"},
    {"id": "pushup", "name": "Push Up", "equipment": "bodyweight", "locationIds": ["home"]},
]


# ──────────────────────────── Idempotence ────────────────────────────


@pytest.mark.parametrize(
    "transform, records",
    [
        (steps.seed_locations, []),
        (steps.add_template_type_and_location, V1_TEMPLATES),
        (steps.merge_imported_exercises, []),
        (steps.merge_imported_workouts, []),
        (steps.merge_imported_sets, []),
        (steps.rename_gym_a_templates, V1_TEMPLATES),
        (steps.merge_seed_exercises, V4_EXERCISES),
        (steps.derive_exercise_locations, V4_EXERCISES),
        (steps.expand_primary_muscle_groups, V4_EXERCISES),
    ],
)
def test_every_transform_is_idempotent(transform, records):
    once = transform(records)
    twice = transform(once)

    assert twice == once


def test_transforms_do_not_mutate_input():
    records = [dict(t) for t in V1_TEMPLATES]
    steps.add_template_type_and_location(records)
    steps.rename_gym_a_templates(records)

    assert records == V1_TEMPLATES


# ──────────────────────────── V2 ────────────────────────────


def test_seed_locations_only_fills_empty_collection():
    assert steps.seed_locations([]) == DEFAULT_LOCATIONS

    custom = [{"id": "garage", "name": "Garage", "sortOrder": 0}]
    assert steps.seed_locations(custom) == custom


@pytest.mark.parametrize(
    "name, expected",
    [("Push Day", "push"), ("PULL", "pull"), ("Leg Day", "lower"), ("Lower Body", "lower"), ("Arms", "push")],
)
def test_infer_template_type(name, expected):
    assert steps.infer_template_type(name) == expected


def test_add_template_type_and_location():
    migrated = {t["id"]: t for t in steps.add_template_type_and_location(V1_TEMPLATES)}

    assert migrated["push-gym"]["type"] == "push"
    assert migrated["push-gym"]["locationId"] == "gym"
    assert migrated["pull-gym"]["locationId"] == "home"
    assert "location" not in migrated["pull-gym"]
    assert migrated["t-lower"]["type"] == "lower"


def test_add_template_type_leaves_typed_templates_alone():
    typed = [{"id": "x", "name": "Pull", "type": "push", "locationId": "home"}]
    assert steps.add_template_type_and_location(typed) == typed


# ──────────────────────────── V3 ────────────────────────────


def test_merge_imported_history_adds_everything_once():
    exercises = steps.merge_imported_exercises([{"id": "bench"}])

    assert len(exercises) == 1 + len(IMPORTED_EXERCISES)
    assert len(steps.merge_imported_workouts([])) == len(IMPORTED_WORKOUTS)
    assert len(steps.merge_imported_sets([])) == len(IMPORTED_SETS)


def test_merge_by_id_keeps_existing_record_on_collision():
    existing = [{"id": "a", "name": "mine"}]
    merged = steps.merge_by_id(existing, [{"id": "a", "name": "theirs"}, {"id": "b"}])

    assert merged == [{"id": "a", "name": "mine"}, {"id": "b"}]


# ──────────────────────────── V4 ────────────────────────────


def test_rename_gym_a_templates_adds_qualifier_and_gym_b():
    migrated = {t["id"]: t for t in steps.rename_gym_a_templates(V1_TEMPLATES)}

    assert migrated["push-gym"]["name"] == "PUSH A (Gym)"
    assert migrated["pull-gym"]["name"] == "PULL A (Gym)"
    assert migrated["legs-gym"]["name"] == "LEGS A (Gym)"
    assert migrated["t-lower"]["name"] == "Lower Body"
    assert {t["id"] for t in SEED_TEMPLATES} <= set(migrated)


def test_rename_keeps_names_that_already_carry_qualifier():
    templates = [{"id": "push-gym", "name": "My A Push"}]
    migrated = steps.rename_gym_a_templates(templates)

    assert migrated[0]["name"] == "My A Push"


def test_merge_seed_exercises_adds_missing_catalogue():
    merged = steps.merge_seed_exercises([])
    assert [e["id"] for e in merged] == [e["id"] for e in SEED_EXERCISES]


# ──────────────────────────── V5 ────────────────────────────


def test_derive_exercise_locations_from_equipment():
    migrated = {e["id"]: e for e in steps.derive_exercise_locations(V4_EXERCISES)}

    assert migrated["bench"]["locationIds"] == ["gym"]
    assert "location" not in migrated["bench"]
    assert migrated["db-row"]["locationIds"] == ["gym", "home"]
    # already migrated
    assert migrated["pushup"]["locationIds"] == ["home"]


# ──────────────────────────── V6 ────────────────────────────


def test_expand_primary_muscle_groups():
    migrated = {e["id"]: e for e in steps.expand_primary_muscle_groups(V4_EXERCISES)}

    assert migrated["bench"]["primaryMuscleGroups"] == ["chest"]
    assert migrated["db-row"]["primaryMuscleGroups"] == ["upper_back"]
    assert migrated["pushup"]["primaryMuscleGroups"] == ["chest"]


def test_expand_primary_keeps_existing_array():
    exercise = [{"id": "x", "primaryMuscleGroups": ["quads", "glutes"], "primaryMuscleGroup": "chest"}]
    assert steps.expand_primary_muscle_groups(exercise) == exercise


def test_steps_are_ordered_and_end_at_current_version():
    versions = [s.version for s in steps.MIGRATION_STEPS]

    assert versions == [2, 3, 4, 5, 6]
    assert steps.CURRENT_MIGRATION_VERSION == 6
