from datetime import date, datetime, timedelta
from typing import Iterable, List

from liftlog.models.analytics import (
    CategoryVolume,
    ExerciseVolume,
    MuscleGroupVolume,
    PersonalRecord,
    VolumeTrend,
    WeeklyVolume,
)
from liftlog.models.exercise import Exercise
from liftlog.models.routine import Routine
from liftlog.models.template import Template
from liftlog.repositories.exercise import ExerciseRepository
from liftlog.repositories.user_settings import UserSettingsRepository
from liftlog.repositories.workout_set import StoreWorkoutSetRepository
from liftlog.utils import dates
from liftlog.utils.dates import week_bounds
from liftlog.utils.log import logger
from liftlog.utils.taxonomy import ANALYTICS_CATEGORIES, MUSCLE_GROUPS

PROJECTED_SETS_PER_EXERCISE = 3
TREND_DEADBAND_PERCENT = 10

__all__ = [
    "VolumeAnalytics",
    "aggregate_into_categories",
    "calculate_projected_volume",
    "calculate_training_score",
    "week_bounds",
]


# ──────────── Pure calculations ────────────


def _scored(volumes: Iterable[MuscleGroupVolume]) -> List[MuscleGroupVolume]:
    return [v for v in volumes if v.target > 0]


def calculate_training_score(volumes: Iterable[MuscleGroupVolume]) -> int:
    """
    Percentage of this week's target sets achieved, 0-100.
    Groups with a zero target do not count towards either side.
    """
    scored = _scored(volumes)
    total_target = sum(v.target for v in scored)
    if total_target <= 0:
        return 0

    total_sets = sum(v.sets for v in scored)
    return min(100, round(100 * total_sets / total_target))


def aggregate_into_categories(volumes: Iterable[MuscleGroupVolume]) -> List[CategoryVolume]:
    by_group = {v.muscle_group: v for v in volumes}
    categories = []
    for category, name, members in ANALYTICS_CATEGORIES:
        member_volumes = [by_group[m] for m in members if m in by_group]
        categories.append(
            CategoryVolume(
                category=category,
                name=name,
                total_sets=sum(v.sets for v in member_volumes),
                total_target=sum(v.target for v in member_volumes),
                muscle_groups=member_volumes,
            )
        )
    return categories


def _to_volumes(
    breakdown: dict[str, dict[str, int]],
    exercises_by_id: dict[str, Exercise],
    targets: dict[str, int],
) -> List[MuscleGroupVolume]:
    """Per-group totals with the per-exercise breakdown, busiest exercise first."""
    volumes = []
    for mg in MUSCLE_GROUPS:
        per_exercise = [
            ExerciseVolume(
                exercise_id=exercise_id,
                exercise_name=exercises_by_id[exercise_id].name,
                sets=count,
            )
            for exercise_id, count in breakdown[mg].items()
        ]
        per_exercise.sort(key=lambda ev: ev.sets, reverse=True)
        volumes.append(
            MuscleGroupVolume(
                muscle_group=mg,
                sets=sum(breakdown[mg].values()),
                target=targets.get(mg, 0),
                exercises=per_exercise,
            )
        )
    return volumes


def calculate_projected_volume(
    routine: Routine,
    templates: Iterable[Template],
    exercises: Iterable[Exercise],
    targets: dict[str, int],
) -> List[MuscleGroupVolume]:
    """
    Weekly sets the routine would produce if followed, assuming a fixed number
    of sets per exercise. Does not look at logged history.
    """
    templates_by_id = {t.id: t for t in templates}
    exercises_by_id = {e.id: e for e in exercises}
    breakdown: dict[str, dict[str, int]] = {mg: {} for mg in MUSCLE_GROUPS}

    for entry in routine.day_schedule:
        for template_id in entry.template_ids:
            template = templates_by_id.get(template_id)
            if template is None:
                continue
            for exercise_id in template.exercise_ids:
                exercise = exercises_by_id.get(exercise_id)
                if exercise is None:
                    continue
                for mg in exercise.primary_muscle_groups:
                    if mg in breakdown:
                        breakdown[mg][exercise.id] = (
                            breakdown[mg].get(exercise.id, 0) + PROJECTED_SETS_PER_EXERCISE
                        )

    return _to_volumes(breakdown, exercises_by_id, targets)


def _percent_change(current: int, previous: int) -> int:
    if previous == 0:
        return 100 if current > 0 else 0
    return round((current - previous) / previous * 100)


def _classify(change: int) -> str:
    if change > TREND_DEADBAND_PERCENT:
        return "up"
    if change < -TREND_DEADBAND_PERCENT:
        return "down"
    return "stable"


# ──────────── Store-backed analytics ────────────


class VolumeAnalytics:
    """
    Read-only volume calculations over logged sets. Missing exercises and
    unknown muscle groups are skipped, never raised.
    """

    def __init__(
        self,
        exercise_repo: ExerciseRepository,
        set_repo: StoreWorkoutSetRepository,
        settings_repo: UserSettingsRepository,
        tz: str = "UTC",
    ):
        self._exercises = exercise_repo
        self._sets = set_repo
        self._settings = settings_repo
        self._tz = tz

    def volume_for_range(self, start: datetime, end: datetime) -> List[MuscleGroupVolume]:
        targets = self._settings.get().muscle_group_targets
        exercises_by_id = {e.id: e for e in self._exercises.get_all()}
        breakdown: dict[str, dict[str, int]] = {mg: {} for mg in MUSCLE_GROUPS}

        for logged in self._sets.get_in_range(start, end):
            exercise = exercises_by_id.get(logged.exercise_id)
            if exercise is None:
                logger.debug(f"Skipping set {logged.id}: unknown exercise {logged.exercise_id}")
                continue
            for mg in exercise.primary_muscle_groups:
                if mg in breakdown:
                    breakdown[mg][exercise.id] = breakdown[mg].get(exercise.id, 0) + 1

        return _to_volumes(breakdown, exercises_by_id, targets)

    def weekly_volume(self, reference: date | None = None) -> WeeklyVolume:
        reference = reference or dates.today(self._tz)
        week_start_day = self._settings.get().week_start_day
        week_start, week_end = week_bounds(reference, week_start_day)

        start, end = dates.day_range(week_start, week_end, self._tz)
        volumes = self.volume_for_range(start, end)
        scored = _scored(volumes)

        return WeeklyVolume(
            week_start=week_start,
            week_end=week_end,
            muscle_groups=volumes,
            total_sets=sum(v.sets for v in scored),
            target_sets=sum(v.target for v in scored),
        )

    def volume_history(self, weeks: int, reference: date | None = None) -> List[WeeklyVolume]:
        """`weeks` consecutive weeks ending with the current one, oldest first."""
        reference = reference or dates.today(self._tz)
        return [
            self.weekly_volume(reference - timedelta(weeks=offset))
            for offset in range(weeks - 1, -1, -1)
        ]

    def volume_trends(self, reference: date | None = None) -> List[VolumeTrend]:
        reference = reference or dates.today(self._tz)
        current = self.weekly_volume(reference)
        previous = {
            v.muscle_group: v.sets
            for v in self.weekly_volume(reference - timedelta(weeks=1)).muscle_groups
        }

        trends = []
        for volume in current.muscle_groups:
            before = previous.get(volume.muscle_group, 0)
            change = _percent_change(volume.sets, before)
            trends.append(
                VolumeTrend(
                    muscle_group=volume.muscle_group,
                    current_week=volume.sets,
                    previous_week=before,
                    change=change,
                    trend=_classify(change),
                )
            )
        return trends

    def exercise_volume_for_muscle_group(
        self, muscle_group: str, reference: date | None = None
    ) -> List[ExerciseVolume]:
        for volume in self.weekly_volume(reference).muscle_groups:
            if volume.muscle_group == muscle_group:
                return volume.exercises
        return []

    def personal_records(self, exercise_id: str) -> PersonalRecord | None:
        sets = self._sets.get_for_exercise(exercise_id)
        if not sets:
            return None

        max_weight = max(s.weight for s in sets)
        max_reps = max(s.reps for s in sets)

        max_volume = 0.0
        max_volume_date = ""
        for s in sets:
            if s.volume > max_volume:
                max_volume = s.volume
                max_volume_date = dates.dt_to_iso(s.logged_at)

        return PersonalRecord(
            exercise_id=exercise_id,
            max_weight=max_weight,
            max_reps=max_reps,
            max_volume=max_volume,
            date=max_volume_date,
        )
