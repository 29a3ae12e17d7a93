from datetime import date as DateType

from fastapi import APIRouter, Depends

from liftlog.analytics.suggestions import find_shortfalls, suggest_exercises
from liftlog.analytics.volume import VolumeAnalytics
from liftlog.dependencies import get_analytics, get_exercise_repo
from liftlog.models.analytics import MuscleShortfall, SuggestedExercise
from liftlog.repositories.exercise import ExerciseRepository

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.get("")
def get_suggestions(
    location_id: str = "gym",
    reference: DateType | None = None,
    analytics: VolumeAnalytics = Depends(get_analytics),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> list[SuggestedExercise]:
    shortfalls = find_shortfalls(analytics.weekly_volume(reference).muscle_groups)
    return suggest_exercises(shortfalls, exercise_repo.get_all(), location_id)


@router.get("/shortfalls")
def get_shortfalls(
    reference: DateType | None = None,
    analytics: VolumeAnalytics = Depends(get_analytics),
) -> list[MuscleShortfall]:
    return find_shortfalls(analytics.weekly_volume(reference).muscle_groups)
