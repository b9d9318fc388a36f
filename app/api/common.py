"""
Pydantic building blocks shared by the routers.

Wire format is camelCase (`imageUrl`, `createdAt`), Python side is snake_case.
Request bodies accept both spellings.
"""

from datetime import datetime, timezone
from typing import Annotated, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    # Stored timestamps are UTC; SQLite hands them back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def changes(self) -> dict:
        """Snake_case dict of the values the client actually sent."""
        return self.model_dump(exclude_unset=True)


class PartialModel(CamelModel):
    """
    Body of a PUT: every field optional, omitted fields are left untouched.

    Sending null is only allowed for columns listed in `nullable_fields`.
    """

    nullable_fields: ClassVar[frozenset] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in sorted(self.model_fields_set):
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self
