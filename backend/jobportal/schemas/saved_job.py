"""Pydantic schemas for saved jobs."""

from datetime import datetime

from jobportal.schemas.base import CamelModel


class SavedJobCreate(CamelModel):
    job_id: str | None = None


class SavedJobRead(CamelModel):
    job_id: str
    saved_at: datetime


class SavedJobAck(CamelModel):
    success: bool = True
    message: str
