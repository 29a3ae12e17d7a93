import json
from typing import Any

from pydantic import ValidationError

from liftlog.models.user_settings import UserSettings
from liftlog.repositories.errors import DataImportError
from liftlog.repositories.exercise import StoreExerciseRepository
from liftlog.repositories.store import CollectionStore
from liftlog.repositories.workout_set import StoreWorkoutSetRepository
from liftlog.utils import dates
from liftlog.utils.db import CollectionKey
from liftlog.utils.log import logger

EXPORT_VERSION = "1.0.0"
CSV_HEADER = ["Exercise Name", "Date", "Reps", "Weight (lb)", "Workout ID"]

# Export document field -> collection
EXPORT_COLLECTIONS: dict[str, CollectionKey] = {
    "exercises": CollectionKey.EXERCISES,
    "templates": CollectionKey.TEMPLATES,
    "locations": CollectionKey.LOCATIONS,
    "workouts": CollectionKey.WORKOUTS,
    "sets": CollectionKey.SETS,
}

REQUIRED_IMPORT_FIELDS = ("exercises", "templates", "workouts", "sets", "userSettings")


# ──────────── Export ────────────


def export_all_data(store: CollectionStore) -> dict[str, Any]:
    """
    Full snapshot of the stored collections. Records are exported as stored,
    including ones that no longer validate.
    """
    data: dict[str, Any] = {
        field: store.get(key, []) for field, key in EXPORT_COLLECTIONS.items()
    }
    data["userSettings"] = store.get(CollectionKey.USER_SETTINGS, {})
    data["exportedAt"] = dates.dt_to_iso(dates.now())
    data["version"] = EXPORT_VERSION
    return data


def export_to_json(store: CollectionStore) -> str:
    return json.dumps(export_all_data(store), indent=2)


def export_to_csv(store: CollectionStore) -> str:
    """
    One row per logged set. Sets whose exercise was deleted show the raw
    exercise id in place of the name.
    """
    exercises = {e.id: e.name for e in StoreExerciseRepository(store).get_all()}
    sets = StoreWorkoutSetRepository(store).get_all()

    rows = [",".join(CSV_HEADER)]
    for s in sets:
        name = exercises.get(s.exercise_id, s.exercise_id)
        rows.append(
            f"{_quote(name)},{dates.dt_to_iso(s.logged_at)},{s.reps},"
            f"{_format_weight(s.weight)},{_quote(s.workout_id)}"
        )
    return "\n".join(rows)


def _quote(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def _format_weight(weight: float) -> int | float:
    return int(weight) if weight.is_integer() else weight


# ──────────── Import ────────────


def import_data(store: CollectionStore, data: dict[str, Any]) -> None:
    """
    Overwrite the collections with an export document. No merge is attempted;
    `locations` is only replaced when the document carries it.
    """
    missing = [f for f in REQUIRED_IMPORT_FIELDS if f not in data]
    if missing:
        raise DataImportError(f"Import document missing: {', '.join(missing)}")

    for field in EXPORT_COLLECTIONS:
        if field in data and not isinstance(data[field], list):
            raise DataImportError(f"Import field {field} must be a list")

    try:
        UserSettings.model_validate(data["userSettings"])
    except ValidationError as e:
        raise DataImportError(f"Import field userSettings is invalid: {e}") from e

    logger.info(f"Importing data exported at {data.get('exportedAt', 'unknown')}")
    for field, key in EXPORT_COLLECTIONS.items():
        if field in data:
            store.set(key, data[field])
    store.set(CollectionKey.USER_SETTINGS, data["userSettings"])
