from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from liftlog.models.base import IdStr, NameStr, StoredModel

Equipment = Literal["barbell", "dumbbell", "cable", "machine", "bodyweight", "other"]
CableAccessory = Literal[
    "straight_bar",
    "ez_bar",
    "rope",
    "v_bar",
    "d_handle",
    "ankle_strap",
    "lat_bar",
    "other",
]


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


class Exercise(StoredModel):
    id: IdStr
    name: NameStr
    equipment: Equipment
    cable_accessory: Optional[CableAccessory] = None
    primary_muscle_groups: list[str] = Field(min_length=1)
    secondary_muscle_groups: list[str] = Field(default_factory=list)
    location_ids: list[str] = Field(default_factory=list)
    is_custom: bool = False

    @model_validator(mode="before")
    @classmethod
    def fold_legacy_primary(cls, data: Any) -> Any:
        """Older records carry a single `primaryMuscleGroup` instead of the array."""
        if not isinstance(data, dict):
            return data
        groups = data.get("primaryMuscleGroups") or data.get("primary_muscle_groups")
        legacy = data.get("primaryMuscleGroup")
        if not groups and legacy:
            data = {**data, "primaryMuscleGroups": [legacy]}
            data.pop("primary_muscle_groups", None)
        return data

    @field_validator("primary_muscle_groups", "secondary_muscle_groups", "location_ids")
    @classmethod
    def dedupe(cls, v: list[str]) -> list[str]:
        return _unique(v)

    def muscle_groups(self) -> list[str]:
        """Primary then secondary, without repeats."""
        return _unique(self.primary_muscle_groups + self.secondary_muscle_groups)

    def is_available_at(self, location_id: str) -> bool:
        return location_id in self.location_ids


class ExerciseCreate(BaseModel):
    name: NameStr
    equipment: Equipment
    cable_accessory: Optional[CableAccessory] = None
    primary_muscle_groups: list[str] = Field(min_length=1)
    secondary_muscle_groups: list[str] = Field(default_factory=list)
    location_ids: list[str] = Field(default_factory=lambda: ["gym"])
