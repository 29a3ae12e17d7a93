"""
Schema transforms, one per version.

Each transform takes the raw records of one collection and returns the records
in the next shape. Records already in that shape come back unchanged, so every
transform can be applied any number of times.
"""

import copy
from dataclasses import dataclass
from typing import Callable

from liftlog.data.historical import IMPORTED_EXERCISES, IMPORTED_SETS, IMPORTED_WORKOUTS
from liftlog.data.seed import DEFAULT_LOCATIONS, SEED_EXERCISES, SEED_TEMPLATES
from liftlog.utils.db import CollectionKey
from liftlog.utils.taxonomy import DEFAULT_PRIMARY_MUSCLE_GROUP, location_ids_for_equipment

Transform = Callable[[list[dict]], list[dict]]


@dataclass(frozen=True)
class MigrationStep:
    version: int
    description: str
    transforms: tuple[tuple[CollectionKey, Transform], ...]


def merge_by_id(existing: list[dict], incoming: list[dict]) -> list[dict]:
    """Append incoming records whose id is not already present."""
    seen = {r.get("id") for r in existing}
    merged = list(existing)
    for record in incoming:
        if record["id"] not in seen:
            merged.append(copy.deepcopy(record))
            seen.add(record["id"])
    return merged


# ───────────────────────────── V2 ─────────────────────────────


def seed_locations(locations: list[dict]) -> list[dict]:
    if locations:
        return locations
    return copy.deepcopy(DEFAULT_LOCATIONS)


def infer_template_type(name: str) -> str:
    lowered = name.lower()
    if "pull" in lowered:
        return "pull"
    if "leg" in lowered or "lower" in lowered:
        return "lower"
    return "push"


def add_template_type_and_location(templates: list[dict]) -> list[dict]:
    migrated = []
    for template in templates:
        if template.get("type"):
            migrated.append(template)
            continue

        updated = {k: v for k, v in template.items() if k != "location"}
        updated["type"] = infer_template_type(template.get("name", ""))
        updated["locationId"] = template.get("location") or "gym"
        migrated.append(updated)
    return migrated


# ───────────────────────────── V3 ─────────────────────────────


def merge_imported_exercises(exercises: list[dict]) -> list[dict]:
    return merge_by_id(exercises, IMPORTED_EXERCISES)


def merge_imported_workouts(workouts: list[dict]) -> list[dict]:
    return merge_by_id(workouts, IMPORTED_WORKOUTS)


def merge_imported_sets(sets: list[dict]) -> list[dict]:
    return merge_by_id(sets, IMPORTED_SETS)


# ───────────────────────────── V4 ─────────────────────────────

RENAME_QUALIFIER = "A"

GYM_A_TEMPLATE_NAMES: dict[str, str] = {
    "push-gym": "PUSH A (Gym)",
    "pull-gym": "PULL A (Gym)",
    "legs-gym": "LEGS A (Gym)",
}


def rename_gym_a_templates(templates: list[dict]) -> list[dict]:
    # A user rename that drops the qualifier is renamed back on a re-run.
    renamed = []
    for template in templates:
        new_name = GYM_A_TEMPLATE_NAMES.get(template.get("id", ""))
        if new_name and RENAME_QUALIFIER not in template.get("name", ""):
            renamed.append({**template, "name": new_name})
        else:
            renamed.append(template)
    return merge_by_id(renamed, SEED_TEMPLATES)


def merge_seed_exercises(exercises: list[dict]) -> list[dict]:
    return merge_by_id(exercises, SEED_EXERCISES)


# ───────────────────────────── V5 ─────────────────────────────


def derive_exercise_locations(exercises: list[dict]) -> list[dict]:
    migrated = []
    for exercise in exercises:
        if exercise.get("locationIds"):
            migrated.append(exercise)
            continue

        updated = {k: v for k, v in exercise.items() if k != "location"}
        updated["locationIds"] = location_ids_for_equipment(exercise.get("equipment"))
        migrated.append(updated)
    return migrated


# ───────────────────────────── V6 ─────────────────────────────


def expand_primary_muscle_groups(exercises: list[dict]) -> list[dict]:
    migrated = []
    for exercise in exercises:
        groups = exercise.get("primaryMuscleGroups")
        if isinstance(groups, list) and groups:
            migrated.append(exercise)
            continue

        legacy = exercise.get("primaryMuscleGroup")
        migrated.append(
            {**exercise, "primaryMuscleGroups": [legacy or DEFAULT_PRIMARY_MUSCLE_GROUP]}
        )
    return migrated


MIGRATION_STEPS: tuple[MigrationStep, ...] = (
    MigrationStep(
        version=2,
        description="add locations, template type and locationId",
        transforms=(
            (CollectionKey.LOCATIONS, seed_locations),
            (CollectionKey.TEMPLATES, add_template_type_and_location),
        ),
    ),
    MigrationStep(
        version=3,
        description="import Setgraph history",
        transforms=(
            (CollectionKey.EXERCISES, merge_imported_exercises),
            (CollectionKey.WORKOUTS, merge_imported_workouts),
            (CollectionKey.SETS, merge_imported_sets),
        ),
    ),
    MigrationStep(
        version=4,
        description="add Gym B templates and rename Gym A templates",
        transforms=(
            (CollectionKey.TEMPLATES, rename_gym_a_templates),
            (CollectionKey.EXERCISES, merge_seed_exercises),
        ),
    ),
    MigrationStep(
        version=5,
        description="derive exercise locationIds from equipment",
        transforms=((CollectionKey.EXERCISES, derive_exercise_locations),),
    ),
    MigrationStep(
        version=6,
        description="convert primaryMuscleGroup to primaryMuscleGroups",
        transforms=((CollectionKey.EXERCISES, expand_primary_muscle_groups),),
    ),
)

CURRENT_MIGRATION_VERSION = MIGRATION_STEPS[-1].version
