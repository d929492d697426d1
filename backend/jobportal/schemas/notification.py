"""Pydantic schemas for the notification feed."""

from datetime import datetime

from jobportal.schemas.base import CamelModel


class NotificationRead(CamelModel):
    id: str
    application_id: str
    job_id: str
    job_title: str
    status_id: int
    status_name: str
    message: str
    timestamp: datetime


class UnreadCount(CamelModel):
    unread: int
    total: int
