import math
from typing import Iterable, List

from liftlog.models.analytics import MuscleGroupVolume, MuscleShortfall, SuggestedExercise
from liftlog.models.exercise import Exercise

MAX_SUGGESTED_SETS = 4


def find_shortfalls(volumes: Iterable[MuscleGroupVolume]) -> List[MuscleShortfall]:
    """
    Muscle groups below their weekly target, most behind (lowest
    current/target ratio) first.
    """
    behind = [v for v in volumes if v.target > 0 and v.sets < v.target]
    behind.sort(key=lambda v: v.sets / v.target)
    return [
        MuscleShortfall(
            muscle_group=v.muscle_group,
            current=v.sets,
            target=v.target,
            shortfall=v.target - v.sets,
        )
        for v in behind
    ]


def suggest_exercises(
    shortfalls: Iterable[MuscleShortfall],
    exercises: Iterable[Exercise],
    location_id: str,
) -> List[SuggestedExercise]:
    """
    Exercises at `location_id` that train at least one muscle group that is
    behind. Only exercises hitting a shortfall as a primary muscle are
    pre-selected.
    """
    shortfall_by_group = {s.muscle_group: s.shortfall for s in shortfalls}
    if not shortfall_by_group:
        return []

    ranked = []
    for exercise in exercises:
        if not exercise.is_available_at(location_id):
            continue

        matched = [mg for mg in exercise.muscle_groups() if mg in shortfall_by_group]
        if not matched:
            continue

        primary_hits = [
            mg for mg in exercise.primary_muscle_groups if mg in shortfall_by_group
        ]
        max_shortfall = max(shortfall_by_group[mg] for mg in matched)
        suggestion = SuggestedExercise(
            exercise=exercise,
            target_muscles=matched,
            suggested_sets=min(math.ceil(max_shortfall / 2), MAX_SUGGESTED_SETS),
            selected=bool(primary_hits),
        )
        ranked.append((len(primary_hits), max_shortfall, suggestion))

    ranked.sort(key=lambda r: (-r[0], -r[1]))
    return [suggestion for _, _, suggestion in ranked]
