from typing import Literal, Optional

from pydantic import Field, field_validator

from .common import BaseSchema

CvTemplate = Literal["clean_navy"]


class CvCreate(BaseSchema):
    title: Optional[str] = Field(default=None, min_length=1, max_length=120)
    template: CvTemplate = "clean_navy"
    is_default: bool = False


class CvUpdate(BaseSchema):
    required_on_update = ("title", "template", "is_default")

    title: Optional[str] = Field(default=None, min_length=1, max_length=120)
    template: Optional[CvTemplate] = None
    is_default: Optional[bool] = None
    override_summary: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("override_summary", mode="before")
    @classmethod
    def empty_summary_clears(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class InclusionCreate(BaseSchema):
    item_id: str = Field(min_length=1, max_length=64)
    order: int = Field(default=0, ge=0)


class InclusionReorder(BaseSchema):
    order: int = Field(ge=0)
