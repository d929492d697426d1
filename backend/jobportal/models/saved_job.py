"""Saved job model: user bookmarks."""

from sqlalchemy import Column, String

from jobportal.models.base import Base, UTCDateTime, utcnow


class SavedJob(Base):
    __tablename__ = "saved_jobs"

    user_id = Column(String(64), primary_key=True)
    job_id = Column(String(64), primary_key=True, index=True)
    saved_at = Column(UTCDateTime, default=utcnow, nullable=False)
