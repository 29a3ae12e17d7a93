from typing import Literal

from pydantic import Field

from liftlog.models.base import IdStr, NameStr, StoredModel

TemplateType = Literal["push", "pull", "lower"]


class Template(StoredModel):
    id: IdStr
    name: NameStr
    type: TemplateType
    location_id: IdStr
    exercise_ids: list[str] = Field(default_factory=list)
