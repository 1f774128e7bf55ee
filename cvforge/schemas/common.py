from datetime import datetime, timezone
from typing import ClassVar, Tuple

import pydantic
from pydantic import BaseModel, ConfigDict

from cvforge.errors import ValidationError

URL_PATTERN = r"^https?://\S+$"


class BaseSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # fields that may be omitted on update but never set to null
    required_on_update: ClassVar[Tuple[str, ...]] = ()

    @pydantic.model_validator(mode="after")
    def reject_cleared_required_fields(self):
        for name in self.required_on_update:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be cleared")
        return self

    def changes(self):
        """Only the keys the caller actually sent."""
        return self.model_dump(exclude_unset=True)


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def naive_utc(value):
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_payload(schema, data, message="Invalid input data"):
    if data is None:
        raise ValidationError("No JSON data provided")
    if not isinstance(data, dict):
        raise ValidationError("JSON body must be an object")
    try:
        return schema.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError.from_pydantic(e, message) from e
