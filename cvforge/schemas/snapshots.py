from typing import Optional

from pydantic import Field

from .common import BaseSchema


class SnapshotForApplication(BaseSchema):
    cv_document_id: str = Field(min_length=1, max_length=64)


class SnapshotCreate(BaseSchema):
    cv_document_id: str = Field(min_length=1, max_length=64)
    application_id: Optional[str] = Field(default=None, max_length=64)
