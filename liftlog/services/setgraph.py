"""
Import of workout history exported from the Setgraph app.

Setgraph CSV columns: exercise name, timestamp, repetitions, weight (lb),
weight (kg), note, label. Each calendar date becomes one completed workout.
"""

import csv
import io
import re
import uuid
from datetime import datetime
from itertools import groupby
from typing import Iterable, List
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from liftlog.models.exercise import Exercise
from liftlog.models.workout import Workout, WorkoutSet
from liftlog.repositories.errors import DataImportError, StoreWriteError
from liftlog.repositories.exercise import StoreExerciseRepository
from liftlog.repositories.store import CollectionStore
from liftlog.repositories.workout import StoreWorkoutRepository
from liftlog.repositories.workout_set import StoreWorkoutSetRepository
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger

FUZZY_MATCH_THRESHOLD = 0.5

# Normalized Setgraph name -> exercise id. An empty id means "create new".
KNOWN_MAPPINGS: dict[str, str] = {
    "dumbbell chest press": "db-flat-low-incline-bench-press",
    "dumbbell incline press": "db-incline-bench-press",
    "dumbell fly": "db-flat-low-incline-bench-press",
    "overhead press": "seated-db-overhead-press",
    "arnold shoulder press": "seated-db-overhead-press",
    "front shoulder raise": "seated-db-lateral-raise",
    "side lateral raises": "seated-db-lateral-raise",
    "tricep extensions ovhd": "db-overhead-triceps-extension",
    "skull crushers": "db-overhead-triceps-extension",
    "bentover row": "one-arm-db-row",
    "dumbbell curls": "incline-bench-db-curl",
    "biceps hammer curls": "db-hammer-curl",
    "dumbbell pullover": "db-pullover",
    "standing calf raise": "db-standing-calf-raise",
    "dumbell shrugs": "",
}


class SetgraphModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SetgraphRow(SetgraphModel):
    exercise_name: str
    date: str
    repetitions: float = 0
    weight_lb: float = 0
    weight_kg: float = 0
    note: str = ""
    label_name: str = ""


class SetgraphMapping(SetgraphModel):
    setgraph_name: str
    exercise_id: str | None = None  # None = create a new exercise
    needs_mapping: bool = False


class SetgraphImportResult(SetgraphModel):
    workouts_created: int = 0
    sets_created: int = 0
    exercises_created: int = 0
    errors: list[str] = Field(default_factory=list)


class SetgraphValidation(SetgraphModel):
    valid: bool
    row_count: int
    errors: list[str] = Field(default_factory=list)


# ──────────── Parsing ────────────


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


def parse_setgraph_csv(content: str) -> List[SetgraphRow]:
    """Parse CSV content, skipping the header and rows without a name or date."""
    reader = csv.reader(io.StringIO(content.strip()))
    next(reader, None)

    rows = []
    for parts in reader:
        parts = [p.strip() for p in parts] + [""] * (7 - len(parts))
        if not parts[0] or not parts[1]:
            continue
        rows.append(
            SetgraphRow(
                exercise_name=parts[0],
                date=parts[1],
                repetitions=_to_float(parts[2]),
                weight_lb=_to_float(parts[3]),
                weight_kg=_to_float(parts[4]),
                note=parts[5],
                label_name=parts[6],
            )
        )
    return rows


def validate_setgraph_csv(content: str) -> SetgraphValidation:
    try:
        rows = parse_setgraph_csv(content)
    except csv.Error as e:
        return SetgraphValidation(
            valid=False, row_count=0, errors=[f"Failed to parse CSV: {e}"]
        )

    if not rows:
        return SetgraphValidation(
            valid=False, row_count=0, errors=["No valid data rows found in CSV"]
        )
    return SetgraphValidation(valid=True, row_count=len(rows))


def unique_exercise_names(rows: Iterable[SetgraphRow]) -> List[str]:
    return sorted({row.exercise_name for row in rows})


# ──────────── Mapping ────────────


def normalize_exercise_name(name: str) -> str:
    name = re.sub(r"[^a-z0-9\s]", "", name.lower())
    return re.sub(r"\s+", " ", name).strip()


def _find_fuzzy_match(normalized: str, exercises: List[Exercise]) -> Exercise | None:
    """Best exercise sharing more than half its words with the name."""
    words = normalized.split(" ")
    best, best_score = None, 0.0

    for exercise in exercises:
        exercise_words = normalize_exercise_name(exercise.name).split(" ")
        matches = sum(
            1
            for word in words
            if len(word) > 2 and any(ew in word or word in ew for ew in exercise_words)
        )
        score = matches / max(len(words), len(exercise_words))
        if score > best_score and score > FUZZY_MATCH_THRESHOLD:
            best, best_score = exercise, score

    return best


def create_default_mappings(
    setgraph_names: Iterable[str], exercises: List[Exercise]
) -> List[SetgraphMapping]:
    by_name = {normalize_exercise_name(e.name): e.id for e in exercises}
    known_ids = {e.id for e in exercises}
    mappings = []

    for name in setgraph_names:
        normalized = normalize_exercise_name(name)

        if normalized in KNOWN_MAPPINGS:
            mapped = KNOWN_MAPPINGS[normalized]
            # a catalogue without the mapped exercise falls through to matching
            if not mapped or mapped in known_ids:
                mappings.append(
                    SetgraphMapping(
                        setgraph_name=name,
                        exercise_id=mapped or None,
                        needs_mapping=not mapped,
                    )
                )
                continue

        exact = by_name.get(normalized)
        if exact:
            mappings.append(SetgraphMapping(setgraph_name=name, exercise_id=exact))
            continue

        fuzzy = _find_fuzzy_match(normalized, exercises)
        if fuzzy:
            mappings.append(SetgraphMapping(setgraph_name=name, exercise_id=fuzzy.id))
            continue

        mappings.append(SetgraphMapping(setgraph_name=name, needs_mapping=True))

    return mappings


def exercise_from_setgraph(name: str, muscle_group: str = "miscellaneous") -> Exercise:
    return Exercise(
        id=f"imported-{uuid.uuid4()}",
        name=name,
        equipment="other",
        primary_muscle_groups=[muscle_group],
        location_ids=["gym", "home"],
        is_custom=True,
    )


# ──────────── Import ────────────


def _parse_timestamp(value: str, tz: ZoneInfo) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def import_setgraph_data(
    rows: List[SetgraphRow],
    mappings: List[SetgraphMapping],
    store: CollectionStore,
    tz_name: str = "UTC",
) -> SetgraphImportResult:
    """
    Create any unmapped exercises, then one completed workout per calendar
    date holding that day's sets in time order. The final mapping list is
    saved for the next import.
    """
    tz = ZoneInfo(tz_name)
    result = SetgraphImportResult()
    exercise_repo = StoreExerciseRepository(store)

    exercise_ids: dict[str, str] = {}
    new_exercises = []
    for mapping in mappings:
        if mapping.exercise_id:
            exercise_ids[mapping.setgraph_name] = mapping.exercise_id
            continue
        try:
            exercise = exercise_from_setgraph(mapping.setgraph_name)
        except ValidationError as e:
            result.errors.append(f"Cannot create exercise {mapping.setgraph_name!r}: {e}")
            continue
        new_exercises.append(exercise)
        exercise_ids[mapping.setgraph_name] = exercise.id

    exercise_repo.add_many(new_exercises)
    result.exercises_created = len(new_exercises)

    timed = []
    for row in rows:
        try:
            timed.append((_parse_timestamp(row.date, tz), row))
        except ValueError:
            result.errors.append(f"Invalid date for {row.exercise_name}: {row.date}")
    timed.sort(key=lambda pair: pair[0])

    workouts: list[Workout] = []
    sets: list[WorkoutSet] = []
    for _, day_rows in groupby(timed, key=lambda pair: pair[0].date()):
        day_rows = list(day_rows)
        workout = Workout(
            id=f"imported-{uuid.uuid4()}",
            started_at=day_rows[0][0],
            completed_at=day_rows[-1][0],
            template_id=None,
        )
        workouts.append(workout)

        for logged_at, row in day_rows:
            exercise_id = exercise_ids.get(row.exercise_name)
            if not exercise_id:
                result.errors.append(f"No mapping found for exercise: {row.exercise_name}")
                continue
            sets.append(
                WorkoutSet(
                    id=f"imported-{uuid.uuid4()}",
                    workout_id=workout.id,
                    exercise_id=exercise_id,
                    reps=max(0, round(row.repetitions)),
                    weight=max(0.0, round(row.weight_lb, 1)),
                    logged_at=logged_at,
                )
            )

    StoreWorkoutRepository(store).add_many(workouts)
    StoreWorkoutSetRepository(store).add_many(sets)
    result.workouts_created = len(workouts)
    result.sets_created = len(sets)

    saved = [
        {"setgraphName": m.setgraph_name, "exerciseId": exercise_ids.get(m.setgraph_name, "")}
        for m in mappings
    ]
    try:
        store.set(CollectionKey.SETGRAPH_MAPPINGS, saved)
    except StoreWriteError as e:
        raise DataImportError("Imported data but failed to save Setgraph mappings") from e

    logger.info(
        f"Setgraph import: {result.workouts_created} workouts, "
        f"{result.sets_created} sets, {result.exercises_created} new exercises"
    )
    return result


def get_saved_mappings(store: CollectionStore) -> list[dict]:
    return store.get(CollectionKey.SETGRAPH_MAPPINGS, [])
