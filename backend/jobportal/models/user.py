"""User profile model. Identity lives with the external provider; the id is theirs."""

from enum import Enum

from sqlalchemy import Column, String, Text

from jobportal.models.base import Base, TimestampMixin, UTCDateTime


class UserRole(str, Enum):
    JOB_SEEKER = "Job Seeker"
    RECRUITER = "Recruiter"
    EMPLOYEE = "Employee"
    ADMIN = "Admin"
    SUPER_ADMIN = "Super Admin"


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(String(128), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, index=True)
    phone = Column(String(32), nullable=False, default="")
    role = Column(String(32), nullable=False, default=UserRole.JOB_SEEKER.value)

    headline = Column(String(255), default="")
    location_id = Column(String(64))
    domain_id = Column(String(64))
    linkedin_url = Column(Text, default="")
    resume_url = Column(Text, default="")

    notification_last_viewed_at = Column(UTCDateTime)
