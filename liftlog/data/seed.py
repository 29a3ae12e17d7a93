"""
Built-in catalogue written on first run and merged in by later migrations.

Records here are already in the current schema shape.
"""

from liftlog.models.user_settings import DEFAULT_MUSCLE_GROUP_TARGETS
from liftlog.utils.taxonomy import location_ids_for_equipment

# (id, name, equipment, primary, secondary, cable accessory)
_EXERCISE_ROWS: tuple[tuple[str, str, str, list[str], list[str], str | None], ...] = (
    # PUSH A (Gym)
    ("barbell-bench-press", "Barbell Bench Press", "barbell", ["chest"], ["front_delts", "triceps"], None),
    ("plate-loaded-incline-press", "Plate-Loaded Incline Press", "machine", ["chest"], ["front_delts", "triceps"], None),
    ("machine-chest-press", "Machine Chest Press", "machine", ["chest"], ["front_delts", "triceps"], None),
    ("seated-lateral-raise", "Seated Lateral Raise", "dumbbell", ["side_delts"], [], None),
    ("overhead-triceps-extension-rope", "Overhead Triceps Extension (rope)", "cable", ["triceps"], [], "rope"),
    ("triceps-pushdown", "Triceps Pushdown", "cable", ["triceps"], [], "straight_bar"),
    # PULL A (Gym)
    ("wide-grip-lat-pulldown", "Wide-Grip Lat Pulldown", "cable", ["lats"], ["biceps"], "lat_bar"),
    ("chest-supported-machine-row", "Chest-Supported Machine Row", "machine", ["upper_back"], ["lats", "biceps"], None),
    ("neutral-close-grip-pulldown", "Neutral/Close-Grip Pulldown", "cable", ["lats"], ["biceps"], "v_bar"),
    ("face-pull", "Face Pull", "cable", ["rear_delts"], ["upper_back"], "rope"),
    ("preacher-curl", "Preacher Curl", "machine", ["biceps"], ["forearms"], None),
    ("cable-hammer-curl", "Cable Hammer Curl", "cable", ["biceps"], ["forearms"], "rope"),
    # LEGS A (Gym)
    ("hack-squat", "Hack Squat", "machine", ["quads"], ["glutes"], None),
    ("leg-press", "Leg Press", "machine", ["quads"], ["glutes"], None),
    ("seated-leg-extension", "Seated Leg Extension", "machine", ["quads"], [], None),
    ("seated-leg-curl", "Seated Leg Curl", "machine", ["hamstrings"], [], None),
    ("hip-abduction-machine", "Hip Abduction Machine", "machine", ["glutes"], [], None),
    ("calf-raise-machine", "Calf Raise Machine", "machine", ["calves"], [], None),
    ("cable-machine-crunch", "Cable Machine Crunch", "cable", ["abs"], [], "rope"),
    ("back-extension", "Back Extension", "machine", ["lower_back"], ["glutes"], None),
    # PUSH B (Gym)
    ("incline-bench-press", "Incline Bench Press", "barbell", ["chest"], ["front_delts", "triceps"], None),
    ("pec-fly-machine", "Pec Fly Machine", "machine", ["chest"], [], None),
    ("db-overhead-press-neutral", "DB Overhead Press (neutral grip)", "dumbbell", ["front_delts"], ["triceps", "side_delts"], None),
    ("cable-lateral-raise", "Cable Lateral Raise", "cable", ["side_delts"], [], "d_handle"),
    ("straight-bar-pushdown", "Straight-Bar Pushdown", "cable", ["triceps"], [], "straight_bar"),
    # PULL B (Gym)
    ("close-grip-pulldown", "Close-Grip Pulldown", "cable", ["lats"], ["biceps"], "v_bar"),
    ("straight-arm-pulldown", "Straight-Arm Pulldown", "cable", ["lats"], [], "straight_bar"),
    ("rear-delt-fly-machine", "Rear Delt Fly Machine", "machine", ["rear_delts"], ["upper_back"], None),
    ("ez-bar-curl", "EZ-Bar Curl", "barbell", ["biceps"], ["forearms"], None),
    ("cable-curl", "Cable Curl", "cable", ["biceps"], ["forearms"], "straight_bar"),
    # LEGS B (Gym)
    ("seated-calf-raise", "Seated Calf Raise", "machine", ["calves"], [], None),
    # PUSH (Home)
    ("db-flat-low-incline-bench-press", "DB Flat/Low-Incline Bench Press", "dumbbell", ["chest"], ["front_delts", "triceps"], None),
    ("db-incline-bench-press", "DB Incline Bench Press", "dumbbell", ["chest"], ["front_delts", "triceps"], None),
    ("seated-db-overhead-press", "Seated DB Overhead Press", "dumbbell", ["front_delts"], ["triceps"], None),
    ("seated-db-lateral-raise", "Seated DB Lateral Raise", "dumbbell", ["side_delts"], [], None),
    ("bench-dips", "Bench Dips", "bodyweight", ["triceps"], ["chest", "front_delts"], None),
    ("db-overhead-triceps-extension", "DB Overhead Triceps Extension", "dumbbell", ["triceps"], [], None),
    # PULL (Home)
    ("chest-supported-db-row", "Chest-Supported DB Row", "dumbbell", ["upper_back"], ["lats", "biceps"], None),
    ("one-arm-db-row", "One-Arm DB Row", "dumbbell", ["upper_back"], ["lats", "biceps"], None),
    ("db-pullover", "DB Pullover", "dumbbell", ["lats"], ["chest"], None),
    ("incline-bench-rear-delt-db-fly", "Incline Bench Rear Delt DB Fly", "dumbbell", ["rear_delts"], ["upper_back"], None),
    ("db-hammer-curl", "DB Hammer Curl", "dumbbell", ["biceps"], ["forearms"], None),
    ("incline-bench-db-curl", "Incline Bench DB Curl", "dumbbell", ["biceps"], ["forearms"], None),
    # LEGS (Home)
    ("goblet-squat", "Goblet Squat", "dumbbell", ["quads"], ["glutes"], None),
    ("db-bulgarian-split-squat", "DB Bulgarian Split Squat", "dumbbell", ["quads"], ["glutes", "hamstrings"], None),
    ("db-hip-thrust", "DB Hip Thrust", "dumbbell", ["glutes"], ["hamstrings"], None),
    ("db-standing-calf-raise", "DB Standing Calf Raise", "dumbbell", ["calves"], [], None),
    ("slant-board-tibialis-raise", "Slant Board Tibialis Raise", "bodyweight", ["miscellaneous"], [], None),
    ("ab-roller-knee-raise", "Ab Roller / Knee Raise", "bodyweight", ["abs"], [], None),
)


def build_exercise(
    exercise_id: str,
    name: str,
    equipment: str,
    primary: list[str],
    secondary: list[str],
    cable_accessory: str | None = None,
    location_ids: list[str] | None = None,
) -> dict:
    return {
        "id": exercise_id,
        "name": name,
        "equipment": equipment,
        "cableAccessory": cable_accessory,
        "primaryMuscleGroups": list(primary),
        "secondaryMuscleGroups": list(secondary),
        "locationIds": location_ids or location_ids_for_equipment(equipment),
        "isCustom": False,
    }


SEED_EXERCISES: list[dict] = [build_exercise(*row) for row in _EXERCISE_ROWS]

SEED_TEMPLATES: list[dict] = [
    # Gym A
    {
        "id": "push-gym",
        "name": "PUSH A (Gym)",
        "type": "push",
        "locationId": "gym",
        "exerciseIds": [
            "barbell-bench-press",
            "plate-loaded-incline-press",
            "machine-chest-press",
            "seated-lateral-raise",
            "overhead-triceps-extension-rope",
            "triceps-pushdown",
        ],
    },
    {
        "id": "pull-gym",
        "name": "PULL A (Gym)",
        "type": "pull",
        "locationId": "gym",
        "exerciseIds": [
            "wide-grip-lat-pulldown",
            "chest-supported-machine-row",
            "neutral-close-grip-pulldown",
            "face-pull",
            "preacher-curl",
            "cable-hammer-curl",
        ],
    },
    {
        "id": "legs-gym",
        "name": "LEGS A (Gym)",
        "type": "lower",
        "locationId": "gym",
        "exerciseIds": [
            "hack-squat",
            "leg-press",
            "seated-leg-extension",
            "seated-leg-curl",
            "hip-abduction-machine",
            "calf-raise-machine",
            "cable-machine-crunch",
            "back-extension",
        ],
    },
    # Gym B
    {
        "id": "push-gym-b",
        "name": "PUSH B (Gym)",
        "type": "push",
        "locationId": "gym",
        "exerciseIds": [
            "incline-bench-press",
            "pec-fly-machine",
            "db-overhead-press-neutral",
            "cable-lateral-raise",
            "straight-bar-pushdown",
        ],
    },
    {
        "id": "pull-gym-b",
        "name": "PULL B (Gym)",
        "type": "pull",
        "locationId": "gym",
        "exerciseIds": [
            "close-grip-pulldown",
            "straight-arm-pulldown",
            "rear-delt-fly-machine",
            "ez-bar-curl",
            "cable-curl",
        ],
    },
    {
        "id": "legs-gym-b",
        "name": "LEGS B (Gym)",
        "type": "lower",
        "locationId": "gym",
        "exerciseIds": [
            "leg-press",
            "hack-squat",
            "seated-leg-curl",
            "hip-abduction-machine",
            "seated-calf-raise",
            "back-extension",
        ],
    },
    # Home
    {
        "id": "push-home",
        "name": "PUSH (Home)",
        "type": "push",
        "locationId": "home",
        "exerciseIds": [
            "db-flat-low-incline-bench-press",
            "db-incline-bench-press",
            "seated-db-overhead-press",
            "seated-db-lateral-raise",
            "bench-dips",
            "db-overhead-triceps-extension",
        ],
    },
    {
        "id": "pull-home",
        "name": "PULL (Home)",
        "type": "pull",
        "locationId": "home",
        "exerciseIds": [
            "chest-supported-db-row",
            "one-arm-db-row",
            "db-pullover",
            "incline-bench-rear-delt-db-fly",
            "db-hammer-curl",
            "incline-bench-db-curl",
        ],
    },
    {
        "id": "legs-home",
        "name": "LEGS (Home)",
        "type": "lower",
        "locationId": "home",
        "exerciseIds": [
            "goblet-squat",
            "db-bulgarian-split-squat",
            "db-hip-thrust",
            "db-standing-calf-raise",
            "slant-board-tibialis-raise",
            "ab-roller-knee-raise",
        ],
    },
]

DEFAULT_LOCATIONS: list[dict] = [
    {"id": "gym", "name": "Gym", "sortOrder": 0},
    {"id": "home", "name": "Home", "sortOrder": 1},
]

DEFAULT_USER_SETTINGS: dict = {
    "weekStartDay": "monday",
    "proteinGoal": 150,
    "sleepGoal": 8,
    "restTimerSeconds": 90,
    "muscleGroupTargets": dict(DEFAULT_MUSCLE_GROUP_TARGETS),
}
