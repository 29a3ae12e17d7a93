from pydantic import Field, field_validator

from liftlog.models.base import IdStr, NameStr, StoredModel

DAYS_PER_WEEK = 7


class DaySchedule(StoredModel):
    day: int = Field(ge=0, le=6)  # 0 = Sunday
    template_ids: list[str] = Field(default_factory=list)

    @property
    def is_rest_day(self) -> bool:
        return not self.template_ids


def empty_schedule() -> list[DaySchedule]:
    return [DaySchedule(day=d) for d in range(DAYS_PER_WEEK)]


class Routine(StoredModel):
    id: IdStr
    name: NameStr
    is_active: bool = False
    day_schedule: list[DaySchedule] = Field(default_factory=empty_schedule)

    @field_validator("day_schedule")
    @classmethod
    def validate_week(cls, v: list[DaySchedule]) -> list[DaySchedule]:
        days = sorted(d.day for d in v)
        if days != list(range(DAYS_PER_WEEK)):
            raise ValueError("day_schedule must hold exactly one entry per day 0-6")
        return sorted(v, key=lambda d: d.day)

    def templates_for_day(self, day: int) -> list[str]:
        for entry in self.day_schedule:
            if entry.day == day:
                return list(entry.template_ids)
        return []
