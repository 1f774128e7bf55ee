from datetime import date
from typing import Annotated, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from .common import BaseSchema, URL_PATTERN, blank_to_none

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]
TechTag = Annotated[str, Field(min_length=1, max_length=50)]


def _check_date_range(start, end):
    if start and end and end < start:
        raise ValueError("End date must be after start date")


# ============ Work Experience ============

class WorkExperienceCreate(BaseSchema):
    company: str = Field(min_length=1, max_length=200)
    role: str = Field(min_length=1, max_length=200)
    location: Optional[str] = Field(default=None, max_length=120)
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    description: Optional[str] = Field(default=None, max_length=3000)

    clear_blank = field_validator("location", "end_date", "description", mode="before")(blank_to_none)

    @model_validator(mode="after")
    def check_dates(self):
        _check_date_range(self.start_date, self.end_date)
        return self


class WorkExperienceUpdate(BaseSchema):
    required_on_update = ("company", "role", "start_date", "is_current")

    company: Optional[str] = Field(default=None, min_length=1, max_length=200)
    role: Optional[str] = Field(default=None, min_length=1, max_length=200)
    location: Optional[str] = Field(default=None, max_length=120)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: Optional[bool] = None
    description: Optional[str] = Field(default=None, max_length=3000)

    clear_blank = field_validator("location", "end_date", "description", mode="before")(blank_to_none)


# ============ Education ============

class EducationCreate(BaseSchema):
    school: str = Field(min_length=1, max_length=200)
    degree: Optional[str] = Field(default=None, max_length=200)
    field: Optional[str] = Field(default=None, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = Field(default=None, max_length=1500)

    clear_blank = field_validator(
        "degree", "field", "start_date", "end_date", "description", mode="before"
    )(blank_to_none)

    @model_validator(mode="after")
    def check_dates(self):
        _check_date_range(self.start_date, self.end_date)
        return self


class EducationUpdate(BaseSchema):
    required_on_update = ("school",)

    school: Optional[str] = Field(default=None, min_length=1, max_length=200)
    degree: Optional[str] = Field(default=None, max_length=200)
    field: Optional[str] = Field(default=None, max_length=200)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = Field(default=None, max_length=1500)

    clear_blank = field_validator(
        "degree", "field", "start_date", "end_date", "description", mode="before"
    )(blank_to_none)


# ============ Skill ============

def _normalize_level(value):
    value = blank_to_none(value)
    if isinstance(value, str):
        return value.strip().lower()
    return value


class SkillCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=80)
    level: Optional[SkillLevel] = None
    category: Optional[str] = Field(default=None, max_length=80)

    normalize_level = field_validator("level", mode="before")(_normalize_level)
    clear_blank = field_validator("category", mode="before")(blank_to_none)


class SkillUpdate(BaseSchema):
    required_on_update = ("name",)

    name: Optional[str] = Field(default=None, min_length=1, max_length=80)
    level: Optional[SkillLevel] = None
    category: Optional[str] = Field(default=None, max_length=80)

    normalize_level = field_validator("level", mode="before")(_normalize_level)
    clear_blank = field_validator("category", mode="before")(blank_to_none)


# ============ Project ============

class ProjectCreate(BaseSchema):
    name: str = Field(min_length=1, max_length=120)
    description: Optional[str] = Field(default=None, max_length=1500)
    link: Optional[str] = Field(default=None, max_length=300, pattern=URL_PATTERN)
    tech: List[TechTag] = Field(default_factory=list, max_length=20)

    clear_blank = field_validator("description", "link", mode="before")(blank_to_none)


class ProjectUpdate(BaseSchema):
    required_on_update = ("name",)

    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    description: Optional[str] = Field(default=None, max_length=1500)
    link: Optional[str] = Field(default=None, max_length=300, pattern=URL_PATTERN)
    # null clears the list
    tech: Optional[List[TechTag]] = Field(default=None, max_length=20)

    clear_blank = field_validator("description", "link", mode="before")(blank_to_none)
