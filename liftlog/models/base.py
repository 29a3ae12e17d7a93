from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

from liftlog.utils.dates import ensure_utc

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

IdStr = Annotated[str, StringConstraints(min_length=1)]

UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class StoredModel(BaseModel):
    """
    Records are persisted in camelCase (`startedAt`, `primaryMuscleGroups`)
    and read back through the same aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    def to_item(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
