from typing import Optional

from pydantic import Field, field_validator

from .common import BaseSchema, URL_PATTERN, blank_to_none


class ProfileUpdate(BaseSchema):
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    location: Optional[str] = Field(default=None, max_length=120)
    headline: Optional[str] = Field(default=None, max_length=160)
    summary: Optional[str] = Field(default=None, max_length=2000)
    linkedin_url: Optional[str] = Field(default=None, max_length=300, pattern=URL_PATTERN)
    github_url: Optional[str] = Field(default=None, max_length=300, pattern=URL_PATTERN)
    website_url: Optional[str] = Field(default=None, max_length=300, pattern=URL_PATTERN)

    clear_blank_urls = field_validator("linkedin_url", "github_url", "website_url", mode="before")(blank_to_none)
