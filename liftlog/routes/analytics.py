from datetime import date as DateType

from fastapi import APIRouter, Depends, HTTPException, Query

from liftlog.analytics.volume import (
    VolumeAnalytics,
    aggregate_into_categories,
    calculate_projected_volume,
    calculate_training_score,
)
from liftlog.dependencies import (
    get_analytics,
    get_exercise_repo,
    get_routine_repo,
    get_settings_repo,
    get_template_repo,
)
from liftlog.models.analytics import (
    CategoryVolume,
    ExerciseVolume,
    MuscleGroupVolume,
    PersonalRecord,
    VolumeTrend,
    WeeklyVolume,
)
from liftlog.repositories.exercise import ExerciseRepository
from liftlog.repositories.routine import StoreRoutineRepository
from liftlog.repositories.template import StoreTemplateRepository
from liftlog.repositories.user_settings import UserSettingsRepository

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/weekly")
def weekly_volume(
    reference: DateType | None = None,
    analytics: VolumeAnalytics = Depends(get_analytics),
) -> WeeklyVolume:
    return analytics.weekly_volume(reference)


@router.get("/weekly/{muscle_group}")
def muscle_group_breakdown(
    muscle_group: str,
    reference: DateType | None = None,
    analytics: VolumeAnalytics = Depends(get_analytics),
) -> list[ExerciseVolume]:
    return analytics.exercise_volume_for_muscle_group(muscle_group, reference)


@router.get("/history")
def volume_history(
    weeks: int = Query(default=4, ge=1, le=52),
    analytics: VolumeAnalytics = Depends(get_analytics),
) -> list[WeeklyVolume]:
    return analytics.volume_history(weeks)


@router.get("/score")
def training_score(
    reference: DateType | None = None,
    analytics: VolumeAnalytics = Depends(get_analytics),
):
    weekly = analytics.weekly_volume(reference)
    return {"score": calculate_training_score(weekly.muscle_groups)}


@router.get("/trends")
def volume_trends(analytics: VolumeAnalytics = Depends(get_analytics)) -> list[VolumeTrend]:
    return analytics.volume_trends()


@router.get("/categories")
def category_volume(
    reference: DateType | None = None,
    analytics: VolumeAnalytics = Depends(get_analytics),
) -> list[CategoryVolume]:
    return aggregate_into_categories(analytics.weekly_volume(reference).muscle_groups)


@router.get("/records/{exercise_id}")
def personal_records(
    exercise_id: str, analytics: VolumeAnalytics = Depends(get_analytics)
) -> PersonalRecord:
    record = analytics.personal_records(exercise_id)
    if record is None:
        raise HTTPException(status_code=404, detail="No sets logged for exercise")
    return record


@router.get("/projection")
def projected_volume(
    routine_id: str | None = None,
    routine_repo: StoreRoutineRepository = Depends(get_routine_repo),
    template_repo: StoreTemplateRepository = Depends(get_template_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
    settings_repo: UserSettingsRepository = Depends(get_settings_repo),
) -> list[MuscleGroupVolume]:
    """Projection for `routine_id`, or the active routine when omitted."""
    if routine_id:
        routine = routine_repo.get_by_id(routine_id)
    else:
        routine = routine_repo.get_active()
    if routine is None:
        raise HTTPException(status_code=404, detail="Routine not found")

    return calculate_projected_volume(
        routine,
        template_repo.get_all(),
        exercise_repo.get_all(),
        settings_repo.get().muscle_group_targets,
    )
