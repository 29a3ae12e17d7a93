from pydantic import Field

from liftlog.models.base import IdStr, NameStr, StoredModel


class WorkoutLocation(StoredModel):
    id: IdStr
    name: NameStr
    sort_order: int = Field(default=0, ge=0)
