from pydantic import Field, field_validator

from liftlog.models.base import StoredModel
from liftlog.utils.dates import WeekStartDay

DEFAULT_MUSCLE_GROUP_TARGETS: dict[str, int] = {
    "chest": 10,
    "lats": 10,
    "upper_back": 6,
    "front_delts": 6,
    "side_delts": 10,
    "rear_delts": 6,
    "triceps": 6,
    "biceps": 6,
    "quads": 10,
    "hamstrings": 6,
    "glutes": 6,
    "calves": 6,
    "abs": 6,
    "forearms": 0,
    "traps": 6,
    "lower_back": 0,
    "miscellaneous": 0,
}


class UserSettings(StoredModel):
    week_start_day: WeekStartDay = "monday"
    protein_goal: int = Field(default=150, ge=0)  # grams
    sleep_goal: float = Field(default=8, ge=0)  # hours
    rest_timer_seconds: int = Field(default=90, ge=0)
    # 0 = tracked but not scored
    muscle_group_targets: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_MUSCLE_GROUP_TARGETS)
    )

    @field_validator("muscle_group_targets")
    @classmethod
    def validate_targets(cls, v: dict[str, int]) -> dict[str, int]:
        negative = [k for k, target in v.items() if target < 0]
        if negative:
            raise ValueError(f"Negative targets for: {', '.join(negative)}")
        return v

    def target_for(self, muscle_group: str) -> int:
        return self.muscle_group_targets.get(muscle_group, 0)
