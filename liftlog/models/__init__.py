from .exercise import Exercise
from .location import WorkoutLocation
from .routine import DaySchedule, Routine
from .supplement import Supplement, SupplementIntake
from .template import Template
from .user_settings import UserSettings
from .workout import Workout, WorkoutSet

__all__ = [
    "DaySchedule",
    "Exercise",
    "Routine",
    "Supplement",
    "SupplementIntake",
    "Template",
    "UserSettings",
    "Workout",
    "WorkoutLocation",
    "WorkoutSet",
]
