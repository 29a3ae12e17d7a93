from datetime import date as DateType

from pydantic import Field

from liftlog.models.base import IdStr, NameStr, StoredModel, UtcDatetime


class Supplement(StoredModel):
    id: IdStr
    name: NameStr
    sort_order: int = Field(default=0, ge=0)
    is_active: bool = True


class SupplementIntake(StoredModel):
    id: IdStr
    supplement_id: IdStr
    date: DateType
    taken_at: UtcDatetime
