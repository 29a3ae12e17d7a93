"""
Training history imported from Setgraph before the app existed.

Merged into the live collections on first run and by the V3 migration; every
record id is prefixed with `import-` so it never collides with user data.
"""

from liftlog.data.seed import build_exercise

IMPORTED_EXERCISES: list[dict] = [
    build_exercise("import-front-raise", "Front Raise", "dumbbell", ["front_delts"], []),
    build_exercise("import-dumbbell-shrugs", "Dumbbell Shrugs", "dumbbell", ["upper_back"], []),
    build_exercise("import-skull-crushers", "Skull Crushers", "barbell", ["triceps"], []),
    build_exercise("import-overhead-press", "Overhead Press", "dumbbell", ["front_delts"], []),
    build_exercise("import-dumbbell-fly", "Dumbbell Fly", "dumbbell", ["chest"], []),
    build_exercise("import-arnold-press", "Arnold Press", "dumbbell", ["front_delts"], []),
    build_exercise("import-dumbbell-curls", "Dumbbell Curls", "dumbbell", ["biceps"], []),
    build_exercise("import-bentover-row", "Bentover Row", "dumbbell", ["upper_back"], []),
    build_exercise("import-stiff-leg-deadlift", "Stiff Leg Deadlift", "dumbbell", ["hamstrings"], []),
    build_exercise("import-pushup", "Push-Up", "bodyweight", ["chest"], []),
    build_exercise("import-pullup", "Pull-Up", "bodyweight", ["lats"], []),
    build_exercise("import-squat", "Squat", "barbell", ["quads"], []),
    build_exercise("import-deadlift", "Deadlift", "barbell", ["lower_back"], []),
    build_exercise("import-plank", "Plank", "bodyweight", ["abs"], []),
]

# (workout id, started, completed, [(exercise id, reps, weight lb, logged at), ...])
_SESSIONS: tuple[tuple[str, str, str, list[tuple[str, int, float, str]]], ...] = (
    (
        "import-2024-01-08",
        "2024-01-08T17:02:00Z",
        "2024-01-08T17:51:00Z",
        [
            ("import-overhead-press", 10, 30.0, "2024-01-08T17:05:00Z"),
            ("import-overhead-press", 8, 35.0, "2024-01-08T17:09:00Z"),
            ("import-front-raise", 12, 15.0, "2024-01-08T17:16:00Z"),
            ("import-dumbbell-fly", 12, 25.0, "2024-01-08T17:24:00Z"),
            ("import-dumbbell-fly", 10, 25.0, "2024-01-08T17:28:00Z"),
            ("import-skull-crushers", 10, 40.0, "2024-01-08T17:40:00Z"),
            ("import-skull-crushers", 9, 40.0, "2024-01-08T17:45:00Z"),
        ],
    ),
    (
        "import-2024-01-10",
        "2024-01-10T17:10:00Z",
        "2024-01-10T17:58:00Z",
        [
            ("import-bentover-row", 10, 40.0, "2024-01-10T17:12:00Z"),
            ("import-bentover-row", 10, 45.0, "2024-01-10T17:17:00Z"),
            ("import-pullup", 6, 0.0, "2024-01-10T17:25:00Z"),
            ("import-pullup", 5, 0.0, "2024-01-10T17:30:00Z"),
            ("import-dumbbell-shrugs", 15, 50.0, "2024-01-10T17:38:00Z"),
            ("import-dumbbell-curls", 12, 20.0, "2024-01-10T17:46:00Z"),
            ("import-dumbbell-curls", 10, 25.0, "2024-01-10T17:51:00Z"),
        ],
    ),
    (
        "import-2024-01-12",
        "2024-01-12T16:45:00Z",
        "2024-01-12T17:40:00Z",
        [
            ("import-squat", 8, 135.0, "2024-01-12T16:50:00Z"),
            ("import-squat", 6, 155.0, "2024-01-12T16:56:00Z"),
            ("import-squat", 5, 165.0, "2024-01-12T17:02:00Z"),
            ("import-stiff-leg-deadlift", 10, 50.0, "2024-01-12T17:12:00Z"),
            ("import-deadlift", 5, 185.0, "2024-01-12T17:22:00Z"),
            ("import-plank", 1, 0.0, "2024-01-12T17:35:00Z"),
        ],
    ),
    (
        "import-2024-01-15",
        "2024-01-15T17:00:00Z",
        "2024-01-15T17:44:00Z",
        [
            ("import-pushup", 20, 0.0, "2024-01-15T17:03:00Z"),
            ("import-pushup", 15, 0.0, "2024-01-15T17:07:00Z"),
            ("import-arnold-press", 10, 30.0, "2024-01-15T17:15:00Z"),
            ("import-arnold-press", 8, 35.0, "2024-01-15T17:20:00Z"),
            ("import-skull-crushers", 10, 45.0, "2024-01-15T17:35:00Z"),
        ],
    ),
)

IMPORTED_WORKOUTS: list[dict] = [
    {
        "id": workout_id,
        "startedAt": started,
        "completedAt": completed,
        "templateId": None,
    }
    for workout_id, started, completed, _ in _SESSIONS
]

IMPORTED_SETS: list[dict] = [
    {
        "id": f"{workout_id}-set-{n:02d}",
        "workoutId": workout_id,
        "exerciseId": exercise_id,
        "reps": reps,
        "weight": weight,
        "loggedAt": logged_at,
    }
    for workout_id, _, _, sets in _SESSIONS
    for n, (exercise_id, reps, weight, logged_at) in enumerate(sets, start=1)
]
