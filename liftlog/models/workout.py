from pydantic import BaseModel, Field

from liftlog.models.base import IdStr, StoredModel, UtcDatetime


class Workout(StoredModel):
    id: IdStr
    started_at: UtcDatetime
    completed_at: UtcDatetime | None = None
    template_id: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


class WorkoutCreate(BaseModel):
    started_at: UtcDatetime | None = None
    template_id: str | None = None


class WorkoutSet(StoredModel):
    id: IdStr
    # Soft references: either may point at a record that no longer exists.
    workout_id: str
    exercise_id: str
    reps: int = Field(ge=0)
    weight: float = Field(default=0, ge=0)  # lb
    logged_at: UtcDatetime

    @property
    def volume(self) -> float:
        return self.weight * self.reps


class WorkoutSetCreate(BaseModel):
    exercise_id: IdStr
    reps: int = Field(ge=0)
    weight: float = Field(default=0, ge=0)
    logged_at: UtcDatetime | None = None
