from datetime import date as DateType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from liftlog.models.exercise import Exercise

Trend = Literal["up", "down", "stable"]


class AnalyticsModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExerciseVolume(AnalyticsModel):
    exercise_id: str
    exercise_name: str
    sets: int = 0


class MuscleGroupVolume(AnalyticsModel):
    muscle_group: str
    sets: int = 0
    target: int = 0
    exercises: list[ExerciseVolume] = Field(default_factory=list)


class WeeklyVolume(AnalyticsModel):
    week_start: DateType
    week_end: DateType
    muscle_groups: list[MuscleGroupVolume]
    total_sets: int
    target_sets: int


class CategoryVolume(AnalyticsModel):
    category: str
    name: str
    total_sets: int
    total_target: int
    muscle_groups: list[MuscleGroupVolume]


class PersonalRecord(AnalyticsModel):
    exercise_id: str
    max_weight: float
    max_reps: int
    max_volume: float  # weight * reps
    date: str  # loggedAt of the max-volume set, "" if every set had zero volume


class VolumeTrend(AnalyticsModel):
    muscle_group: str
    current_week: int
    previous_week: int
    change: int  # percent
    trend: Trend


class MuscleShortfall(AnalyticsModel):
    muscle_group: str
    current: int
    target: int
    shortfall: int


class SuggestedExercise(AnalyticsModel):
    exercise: Exercise
    target_muscles: list[str]
    suggested_sets: int
    selected: bool
