from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .common import BaseSchema, URL_PATTERN, blank_to_none, naive_utc

ApplicationStatus = Literal["draft", "applied", "interview", "offer", "rejected"]
SortField = Literal["created_at", "updated_at", "applied_at"]

MAX_PAGE_SIZE = 100


def _lower(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class ApplicationCreate(BaseSchema):
    company: str = Field(min_length=1, max_length=200)
    position: str = Field(min_length=1, max_length=200)
    link: Optional[str] = Field(default=None, max_length=500, pattern=URL_PATTERN)
    status: ApplicationStatus = "applied"
    applied_at: Optional[datetime] = None
    last_contact_at: Optional[datetime] = None
    notes: Optional[str] = Field(default=None, max_length=10000)

    clear_blank = field_validator("link", "applied_at", "last_contact_at", mode="before")(blank_to_none)
    normalize_status = field_validator("status", mode="before")(_lower)
    to_utc = field_validator("applied_at", "last_contact_at")(naive_utc)


class ApplicationUpdate(BaseSchema):
    required_on_update = ("company", "position", "status")

    company: Optional[str] = Field(default=None, min_length=1, max_length=200)
    position: Optional[str] = Field(default=None, min_length=1, max_length=200)
    link: Optional[str] = Field(default=None, max_length=500, pattern=URL_PATTERN)
    status: Optional[ApplicationStatus] = None
    applied_at: Optional[datetime] = None
    last_contact_at: Optional[datetime] = None
    notes: Optional[str] = Field(default=None, max_length=10000)

    clear_blank = field_validator("link", "applied_at", "last_contact_at", mode="before")(blank_to_none)
    normalize_status = field_validator("status", mode="before")(_lower)
    to_utc = field_validator("applied_at", "last_contact_at")(naive_utc)


class ApplicationListQuery(BaseSchema):
    status: Optional[List[ApplicationStatus]] = None
    q: Optional[str] = Field(default=None, max_length=200)
    search: Optional[str] = Field(default=None, max_length=200)
    sort: SortField = "created_at"
    sort_by: Optional[SortField] = None
    order: Literal["asc", "desc"] = "desc"
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)

    @field_validator("status", mode="before")
    @classmethod
    def split_statuses(cls, value):
        # "applied,interview" or repeated ?status= params
        if value is None or value == "":
            return None
        if isinstance(value, str):
            value = value.split(",")
        return [_lower(v) for v in value if str(v).strip()] or None

    @field_validator("page_size")
    @classmethod
    def cap_page_size(cls, value):
        return min(value, MAX_PAGE_SIZE)

    @property
    def term(self):
        return self.search or self.q

    @property
    def sort_field(self):
        return self.sort_by or self.sort
