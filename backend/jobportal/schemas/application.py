"""Pydantic schemas for applications."""

from datetime import datetime

from pydantic import Field

from jobportal.schemas.base import CamelModel


class ApplicationCreate(CamelModel):
    user_id: str
    job_id: str


class ApplicationStatusUpdate(CamelModel):
    status_id: int = Field(ge=1, le=4)


class ApplicationRead(CamelModel):
    id: str
    job_id: str
    user_id: str
    status_id: int
    status_name: str
    applied_at: datetime | None = None
    viewed_at: datetime | None = None
    updated_at: datetime | None = None
