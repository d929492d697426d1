"""Pydantic schemas package."""

from jobportal.schemas.application import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
)
from jobportal.schemas.job import (
    DashboardJobs,
    JobBase,
    JobCreate,
    JobDeleted,
    JobDetail,
    JobListItem,
    JobRead,
    JobSummary,
    JobUpdate,
)
from jobportal.schemas.notification import NotificationRead, UnreadCount
from jobportal.schemas.reference import ReferenceRead
from jobportal.schemas.saved_job import SavedJobAck, SavedJobCreate, SavedJobRead
from jobportal.schemas.user import (
    ProfileEntryCreate,
    ProfileEntryRead,
    ProfileStats,
    ProfileStrength,
    UserCreate,
    UserProfile,
    UserRead,
    UserUpdate,
)

__all__ = [
    # Application
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationStatusUpdate",
    # Job
    "DashboardJobs",
    "JobBase",
    "JobCreate",
    "JobDeleted",
    "JobDetail",
    "JobListItem",
    "JobRead",
    "JobSummary",
    "JobUpdate",
    # Notification
    "NotificationRead",
    "UnreadCount",
    # Reference
    "ReferenceRead",
    # SavedJob
    "SavedJobAck",
    "SavedJobCreate",
    "SavedJobRead",
    # User
    "ProfileEntryCreate",
    "ProfileEntryRead",
    "ProfileStats",
    "ProfileStrength",
    "UserCreate",
    "UserProfile",
    "UserRead",
    "UserUpdate",
]
