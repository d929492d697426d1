"""Profile sub-section entries (education, employment, projects, skills, languages)."""

from enum import Enum

from sqlalchemy import Column, String, ForeignKey, JSON, Index

from jobportal.models.base import Base, TimestampMixin, StringIdMixin


class ProfileSection(str, Enum):
    EDUCATION = "education"
    EMPLOYMENT = "employment"
    PROJECTS = "projects"
    SKILLS = "skills"
    LANGUAGES = "languages"


class ProfileEntry(StringIdMixin, TimestampMixin, Base):
    __tablename__ = "profile_entries"

    user_id = Column(String(128), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    section = Column(String(32), nullable=False)
    details = Column(JSON, default=dict)

    __table_args__ = (
        Index("idx_profile_entries_user_section", "user_id", "section"),
    )
